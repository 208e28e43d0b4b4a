"""配置单元测试。"""

from src.core.config import Settings, parse_cors


def test_defaults(test_settings):
    assert test_settings.LISTING_PAGE_SIZE == 24
    assert test_settings.XML_SOURCE_MARKER == "/xml"
    assert test_settings.PROXY_ENDPOINT is None
    assert test_settings.USER_ID_HEADER == "X-User-Id"


def test_parse_cors_comma_separated():
    assert parse_cors("http://a.com, http://b.com") == ["http://a.com", "http://b.com"]


def test_all_cors_origins_includes_frontend():
    settings = Settings(
        BACKEND_CORS_ORIGINS="http://a.com/",
        FRONTEND_HOST="http://localhost:3000",
    )
    assert settings.all_cors_origins == ["http://a.com", "http://localhost:3000"]

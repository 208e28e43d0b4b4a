"""Application configuration."""

from typing import Annotated, Any, Literal

from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",")]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Application
    PROJECT_NAME: str = "vodlist"
    SERVER_PORT: int = 8000
    ROOTPATH: str = ""
    API_V1_STR: str = "/api/v1"
    FRONTEND_HOST: str = "http://localhost:3000"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"

    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(parse_cors)
    ] = []
    CORS_ALLOW_METHODS: list[str] = ["GET", "POST", "PUT", "DELETE"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    @computed_field
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS] + [
            self.FRONTEND_HOST
        ]

    # Redis（用户数据与分类页码）
    REDIS_URL: str = "redis://localhost:6379/0"

    # Upstream fetch
    PROXY_ENDPOINT: str | None = None  # e.g. http://localhost:3000/proxy
    FETCHER_TIMEOUT_SEC: float = 15.0
    FETCHER_USER_AGENT: str = "Mozilla/5.0 (compatible; vodlist/0.1)"

    # Listing
    LISTING_PAGE_SIZE: int = 24
    LISTING_TRACKER_MAX_SCOPES: int = 10_000
    XML_SOURCE_MARKER: str = "/xml"
    CATEGORY_PAGE_TTL_SEC: int = 60 * 60 * 24  # 页码记忆 1 天
    USER_ID_HEADER: str = "X-User-Id"


settings = Settings()

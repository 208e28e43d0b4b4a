"""
pytest 配置和共享 fixtures。

测试分层：
- unit/: 单元测试（不依赖外部服务，上游接口通过假的 ProxyFetcher 模拟）

使用方法：
    # 运行所有测试
    uv run pytest

    # 只运行单元测试
    uv run pytest tests/unit/

    # 运行带覆盖率
    uv run pytest --cov=src --cov-report=html
"""

import json
from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.core.config import Settings
from src.modules.listings.infrastructure.page_store import InMemoryCategoryPageStore
from src.modules.sources.domain.entities import SourceDescriptor
from tests.fakes import FakeProxyFetcher, InMemorySourceRegistry

# ============================================
# 配置 Fixtures
# ============================================


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    """测试环境配置。"""
    return Settings(
        ENVIRONMENT="local",
        REDIS_URL="redis://localhost:6379/1",  # 使用 DB 1 隔离测试
        PROXY_ENDPOINT=None,
    )


# ============================================
# 领域对象 Fixtures
# ============================================


@pytest.fixture
def sample_source() -> SourceDescriptor:
    """示例 JSON 视频源。"""
    return SourceDescriptor(id="s1", name="Src", url="http://x")


@pytest.fixture
def sample_xml_source() -> SourceDescriptor:
    """示例 XML 视频源。"""
    return SourceDescriptor(
        id="x1", name="XmlSrc", url="https://vod.example.com/api.php/provide/vod/at/xml"
    )


@pytest.fixture
def sample_video_data() -> dict[str, Any]:
    """示例 JSON 视频记录。"""
    return {
        "vod_id": 42,
        "vod_name": "Example Movie",
        "vod_pic": "https://img.example.com/42.jpg",
        "vod_year": "2023",
        "vod_area": "大陆",
        "type_name": "动作片",
        "vod_director": "Someone",
        "vod_actor": "A,B",
        "vod_remarks": "HD",
        "vod_content": "<p>A <b>good</b> movie</p>",
        "vod_play_from": "m3u8$$$mp4",
        "vod_play_url": "第1集$http://a/1.m3u8$$$第1集$http://a/1.mp4",
    }


@pytest.fixture
def page_store() -> InMemoryCategoryPageStore:
    return InMemoryCategoryPageStore()


# ============================================
# Redis Fixtures
# ============================================


@pytest.fixture
def mock_redis_client() -> MagicMock:
    """Mock Redis 客户端（内存字典实现 get/set）。"""
    from src.core.infrastructure.redis.client import RedisClient

    store: dict[str, str] = {}

    async def _get(key: str) -> str | None:
        return store.get(key)

    async def _set(key: str, value: str, ex=None) -> bool:
        store[key] = value
        return True

    async def _get_json(key: str) -> Any | None:
        value = store.get(key)
        return None if value is None else json.loads(value)

    async def _set_json(key: str, value: Any, ex=None) -> bool:
        store[key] = json.dumps(value, ensure_ascii=False)
        return True

    client = MagicMock(spec=RedisClient)
    client.store = store
    client.ping = AsyncMock(return_value=True)
    client.get = AsyncMock(side_effect=_get)
    client.set = AsyncMock(side_effect=_set)
    client.delete = AsyncMock(return_value=1)
    client.get_json = AsyncMock(side_effect=_get_json)
    client.set_json = AsyncMock(side_effect=_set_json)
    return client


# ============================================
# HTTP Client Fixtures
# ============================================


@pytest.fixture
def source_registry(sample_source) -> InMemorySourceRegistry:
    return InMemorySourceRegistry({"user-123": [sample_source]})


@pytest.fixture
def proxy_fetcher() -> FakeProxyFetcher:
    return FakeProxyFetcher()


@pytest.fixture
async def async_client(
    source_registry, proxy_fetcher, page_store
) -> AsyncGenerator[AsyncClient, None]:
    """异步 HTTP 客户端（用于 API 测试）。"""
    from main import app
    from src.modules.listings.application import dependencies as listings_app_deps
    from src.modules.sources.application import dependencies as sources_app_deps

    original_overrides = dict(app.dependency_overrides)

    # 覆盖依赖
    app.dependency_overrides[sources_app_deps.get_source_registry] = (
        lambda: source_registry
    )
    app.dependency_overrides[listings_app_deps.get_proxy_fetcher] = lambda: proxy_fetcher
    app.dependency_overrides[listings_app_deps.get_category_page_store] = (
        lambda: page_store
    )

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-User-Id": "user-123"},
    ) as client:
        yield client

    # 恢复依赖覆盖
    app.dependency_overrides.clear()
    app.dependency_overrides.update(original_overrides)


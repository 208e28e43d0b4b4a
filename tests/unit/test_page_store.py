"""分类页码存储单元测试。"""

import pytest

from src.core.infrastructure.redis.keys import RedisKeys
from src.modules.listings.infrastructure.page_store import (
    InMemoryCategoryPageStore,
    RedisCategoryPageStore,
)

# 使用 anyio 作为异步测试后端
pytestmark = pytest.mark.anyio


def test_category_keys():
    assert RedisKeys.category_page("user-1", 6) == "listing:user-1:category_6_page"
    assert RedisKeys.category_page_count("user-1", 6) == (
        "listing:user-1:category_6_pagecount"
    )


class TestRedisCategoryPageStore:
    """Redis 实现测试。"""

    async def test_page_roundtrip(self, mock_redis_client):
        store = RedisCategoryPageStore(mock_redis_client, ttl_sec=60)

        assert await store.get_page("user-1", 6) is None
        await store.set_page("user-1", 6, 3)

        assert await store.get_page("user-1", 6) == 3
        mock_redis_client.set.assert_awaited_with(
            "listing:user-1:category_6_page", "3", ex=60
        )

    async def test_page_count(self, mock_redis_client):
        store = RedisCategoryPageStore(mock_redis_client)

        await store.set_page_count("user-1", 6, 12)

        assert await store.get_page_count("user-1", 6) == 12
        assert mock_redis_client.store["listing:user-1:category_6_pagecount"] == "12"

    async def test_garbage_value_ignored(self, mock_redis_client):
        mock_redis_client.store["listing:user-1:category_6_page"] = "oops"
        store = RedisCategoryPageStore(mock_redis_client)

        assert await store.get_page("user-1", 6) is None


class TestInMemoryCategoryPageStore:
    """内存实现测试。"""

    async def test_scoped_by_user_and_category(self):
        store = InMemoryCategoryPageStore()
        await store.set_page("user-1", 6, 3)
        await store.set_page_count("user-1", 6, 10)

        assert await store.get_page("user-1", 6) == 3
        assert await store.get_page("user-2", 6) is None
        assert await store.get_page("user-1", 7) is None
        assert await store.get_page_count("user-1", 6) == 10

"""Category page store implementations."""

from src.core.config import settings
from src.core.infrastructure.redis.client import RedisClient
from src.core.infrastructure.redis.keys import RedisKeys
from src.modules.listings.domain.ports import CategoryPageStore
from src.modules.listings.infrastructure.parsers.base import coerce_int


class RedisCategoryPageStore(CategoryPageStore):
    """Redis 实现：listing:{scope}:category_{type_id}_page。"""

    def __init__(self, redis: RedisClient, ttl_sec: int | None = None):
        self.redis = redis
        self.ttl_sec = ttl_sec or settings.CATEGORY_PAGE_TTL_SEC

    async def get_page(self, scope: str, type_id: int) -> int | None:
        return coerce_int(await self.redis.get(RedisKeys.category_page(scope, type_id)))

    async def set_page(self, scope: str, type_id: int, page: int) -> None:
        await self.redis.set(
            RedisKeys.category_page(scope, type_id), str(page), ex=self.ttl_sec
        )

    async def get_page_count(self, scope: str, type_id: int) -> int | None:
        return coerce_int(
            await self.redis.get(RedisKeys.category_page_count(scope, type_id))
        )

    async def set_page_count(self, scope: str, type_id: int, page_count: int) -> None:
        await self.redis.set(
            RedisKeys.category_page_count(scope, type_id),
            str(page_count),
            ex=self.ttl_sec,
        )


class InMemoryCategoryPageStore(CategoryPageStore):
    """进程内实现，用于测试和单机调试。"""

    def __init__(self) -> None:
        self._pages: dict[tuple[str, int], int] = {}
        self._page_counts: dict[tuple[str, int], int] = {}

    async def get_page(self, scope: str, type_id: int) -> int | None:
        return self._pages.get((scope, type_id))

    async def set_page(self, scope: str, type_id: int, page: int) -> None:
        self._pages[(scope, type_id)] = page

    async def get_page_count(self, scope: str, type_id: int) -> int | None:
        return self._page_counts.get((scope, type_id))

    async def set_page_count(self, scope: str, type_id: int, page_count: int) -> None:
        self._page_counts[(scope, type_id)] = page_count

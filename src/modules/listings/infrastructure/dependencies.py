"""Listing module dependencies."""

from fastapi import Depends

from src.core.config import settings
from src.core.infrastructure.redis import RedisClient, get_redis_client
from src.modules.listings.infrastructure.page_store import RedisCategoryPageStore
from src.modules.listings.infrastructure.proxy_fetcher import HttpxProxyFetcher


async def get_proxy_fetcher() -> HttpxProxyFetcher:
    return HttpxProxyFetcher(
        proxy_endpoint=settings.PROXY_ENDPOINT,
        timeout=settings.FETCHER_TIMEOUT_SEC,
        user_agent=settings.FETCHER_USER_AGENT,
    )


async def get_category_page_store(
    redis: RedisClient = Depends(get_redis_client),
) -> RedisCategoryPageStore:
    return RedisCategoryPageStore(redis)

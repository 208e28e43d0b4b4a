"""Source module dependencies."""

from fastapi import Depends

from src.core.infrastructure.redis import RedisClient, get_redis_client
from src.modules.sources.infrastructure.repositories import RedisSourceRegistry


async def get_source_registry(
    redis: RedisClient = Depends(get_redis_client),
) -> RedisSourceRegistry:
    return RedisSourceRegistry(redis)

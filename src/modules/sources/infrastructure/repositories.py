"""Redis source registry."""

from loguru import logger
from pydantic import ValidationError

from src.core.infrastructure.redis.client import RedisClient
from src.core.infrastructure.redis.keys import RedisKeys
from src.modules.sources.domain.entities import SourceDescriptor
from src.modules.sources.domain.repository import SourceRegistry

VIDEO_APIS_KEY = "video-apis"


class RedisSourceRegistry(SourceRegistry):
    """视频源列表以 JSON 数组存储在 user:{user_id}:video-apis。"""

    def __init__(self, redis: RedisClient):
        self.redis = redis

    async def list_sources(self, user_id: str) -> list[SourceDescriptor]:
        raw = await self.redis.get_json(RedisKeys.user_data(user_id, VIDEO_APIS_KEY))
        if not isinstance(raw, list):
            return []

        sources: list[SourceDescriptor] = []
        for item in raw:
            try:
                sources.append(SourceDescriptor.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid stored source for {user_id}: {e}")
        return sources

    async def replace_sources(
        self, user_id: str, sources: list[SourceDescriptor]
    ) -> list[SourceDescriptor]:
        await self.redis.set_json(
            RedisKeys.user_data(user_id, VIDEO_APIS_KEY),
            [source.model_dump(mode="json") for source in sources],
        )
        return list(sources)

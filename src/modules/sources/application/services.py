"""Source registry application service."""

from src.core.infrastructure.logging import BusinessEvents
from src.modules.sources.domain.entities import SourceDescriptor
from src.modules.sources.domain.exceptions import InvalidSourceError, SourceNotFoundError
from src.modules.sources.domain.repository import SourceRegistry


class SourceRegistryService:
    """用户视频源列表的增删查。"""

    def __init__(self, registry: SourceRegistry) -> None:
        self.registry = registry

    async def list_sources(self, user_id: str) -> list[SourceDescriptor]:
        return await self.registry.list_sources(user_id)

    async def get_source(self, user_id: str, source_id: str) -> SourceDescriptor:
        for source in await self.registry.list_sources(user_id):
            if source.id == source_id:
                return source
        raise SourceNotFoundError(source_id)

    async def replace_sources(
        self, user_id: str, sources: list[SourceDescriptor]
    ) -> list[SourceDescriptor]:
        seen: set[str] = set()
        for source in sources:
            if source.id in seen:
                raise InvalidSourceError(f"duplicate id '{source.id}'")
            seen.add(source.id)

        saved = await self.registry.replace_sources(user_id, sources)
        BusinessEvents.source_registry_changed(
            user_id=user_id, action="replace", source_count=len(saved)
        )
        return saved

    async def add_source(self, user_id: str, source: SourceDescriptor) -> list[SourceDescriptor]:
        """Add a source; an existing entry with the same id is replaced in place."""
        sources = await self.registry.list_sources(user_id)
        for index, existing in enumerate(sources):
            if existing.id == source.id:
                sources[index] = source
                break
        else:
            sources.append(source)

        saved = await self.registry.replace_sources(user_id, sources)
        BusinessEvents.source_registry_changed(
            user_id=user_id, action="add", source_count=len(saved), source_id=source.id
        )
        return saved

    async def remove_source(self, user_id: str, source_id: str) -> list[SourceDescriptor]:
        sources = await self.registry.list_sources(user_id)
        remaining = [source for source in sources if source.id != source_id]
        if len(remaining) == len(sources):
            raise SourceNotFoundError(source_id)

        saved = await self.registry.replace_sources(user_id, remaining)
        BusinessEvents.source_registry_changed(
            user_id=user_id, action="remove", source_count=len(saved), source_id=source_id
        )
        return saved

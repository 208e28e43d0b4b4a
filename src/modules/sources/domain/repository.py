"""Source registry interface."""

from abc import ABC, abstractmethod

from src.modules.sources.domain.entities import SourceDescriptor


class SourceRegistry(ABC):
    """用户级视频源列表（按 user_id 隔离）。"""

    @abstractmethod
    async def list_sources(self, user_id: str) -> list[SourceDescriptor]:
        """List a user's sources in stored order."""
        pass

    @abstractmethod
    async def replace_sources(
        self, user_id: str, sources: list[SourceDescriptor]
    ) -> list[SourceDescriptor]:
        """Replace the whole list."""
        pass

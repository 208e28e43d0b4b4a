"""Source module application dependencies."""

from typing import NoReturn

from fastapi import Depends

from src.modules.sources.application.services import SourceRegistryService
from src.modules.sources.domain.repository import SourceRegistry


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_source_registry() -> SourceRegistry:
    _missing_dependency("SourceRegistry")


async def get_source_registry_service(
    registry: SourceRegistry = Depends(get_source_registry),
) -> SourceRegistryService:
    return SourceRegistryService(registry)

"""Source API routes."""

from fastapi import APIRouter, Depends, status

from src.core.application.security import get_current_user_id
from src.core.interfaces.http.response import ApiResponse
from src.modules.sources.application.dependencies import get_source_registry_service
from src.modules.sources.application.services import SourceRegistryService
from src.modules.sources.domain.entities import SourceDescriptor
from src.modules.sources.interfaces.schemas import (
    ReplaceSourcesRequest,
    SourceRequest,
    SourceResponse,
)

router = APIRouter(prefix="/sources", tags=["sources"])


def _to_responses(sources: list[SourceDescriptor]) -> list[SourceResponse]:
    return [SourceResponse.from_descriptor(source) for source in sources]


@router.get(
    "",
    response_model=ApiResponse[list[SourceResponse]],
    summary="获取我的视频源列表",
)
async def list_sources(
    user_id: str = Depends(get_current_user_id),
    service: SourceRegistryService = Depends(get_source_registry_service),
) -> ApiResponse[list[SourceResponse]]:
    """List all sources."""
    sources = await service.list_sources(user_id)
    return ApiResponse.success(data=_to_responses(sources))


@router.put(
    "",
    response_model=ApiResponse[list[SourceResponse]],
    summary="整体替换视频源列表",
)
async def replace_sources(
    request: ReplaceSourcesRequest,
    user_id: str = Depends(get_current_user_id),
    service: SourceRegistryService = Depends(get_source_registry_service),
) -> ApiResponse[list[SourceResponse]]:
    """Replace the source list."""
    saved = await service.replace_sources(
        user_id, [item.to_descriptor() for item in request.sources]
    )
    return ApiResponse.success(data=_to_responses(saved), message="Sources saved")


@router.post(
    "",
    response_model=ApiResponse[list[SourceResponse]],
    status_code=status.HTTP_201_CREATED,
    summary="添加视频源",
    description="添加视频源；同 ID 的已有源会被替换",
)
async def add_source(
    request: SourceRequest,
    user_id: str = Depends(get_current_user_id),
    service: SourceRegistryService = Depends(get_source_registry_service),
) -> ApiResponse[list[SourceResponse]]:
    """Add a source."""
    saved = await service.add_source(user_id, request.to_descriptor())
    return ApiResponse.success(
        data=_to_responses(saved), message="Source added", code=201
    )


@router.get(
    "/{source_id}",
    response_model=ApiResponse[SourceResponse],
    summary="获取视频源详情",
)
async def get_source(
    source_id: str,
    user_id: str = Depends(get_current_user_id),
    service: SourceRegistryService = Depends(get_source_registry_service),
) -> ApiResponse[SourceResponse]:
    """Get source by ID."""
    source = await service.get_source(user_id, source_id)
    return ApiResponse.success(data=SourceResponse.from_descriptor(source))


@router.delete(
    "/{source_id}",
    response_model=ApiResponse[list[SourceResponse]],
    summary="删除视频源",
)
async def remove_source(
    source_id: str,
    user_id: str = Depends(get_current_user_id),
    service: SourceRegistryService = Depends(get_source_registry_service),
) -> ApiResponse[list[SourceResponse]]:
    """Remove a source."""
    saved = await service.remove_source(user_id, source_id)
    return ApiResponse.success(data=_to_responses(saved), message="Source removed")

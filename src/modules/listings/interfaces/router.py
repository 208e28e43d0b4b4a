"""Listing API routes."""

from fastapi import APIRouter, Depends, Query

from src.core.application.security import get_current_user_id
from src.core.interfaces.http.response import ApiResponse
from src.modules.listings.application.dependencies import (
    get_listing_fetch_service,
    get_request_tracker,
)
from src.modules.listings.application.fetch_service import ListingFetchService
from src.modules.listings.application.layout import select_columns
from src.modules.listings.application.navigation import (
    LatestRequestTracker,
    jump_to,
    next_page,
    previous_page,
    view_scope,
)
from src.modules.listings.domain.entities import (
    CategoryDescriptor,
    ListingRequest,
    ListingStatus,
)
from src.modules.listings.domain.exceptions import ListingSupersededError
from src.modules.listings.interfaces.schemas import GridColumnsResponse, ListingResponse
from src.modules.sources.application.dependencies import get_source_registry_service
from src.modules.sources.application.services import SourceRegistryService

router = APIRouter(prefix="/listings", tags=["listings"])


@router.get(
    "",
    response_model=ApiResponse[ListingResponse],
    summary="获取分类视频列表",
    description="从指定视频源抓取某个分类的一页视频；上游失败时返回空列表而不是错误",
)
async def get_listing(
    source_id: str = Query(..., min_length=1, description="视频源ID"),
    type_id: int = Query(..., description="分类ID"),
    type_pid: int = Query(0, description="父分类ID"),
    type_name: str = Query("", description="分类名称"),
    page: int | None = Query(None, ge=1, description="页码，缺省时使用上次浏览的页码"),
    jump: str | None = Query(None, description="跳转页码，超出已知总页数时保持当前页"),
    user_id: str = Depends(get_current_user_id),
    source_service: SourceRegistryService = Depends(get_source_registry_service),
    service: ListingFetchService = Depends(get_listing_fetch_service),
    tracker: LatestRequestTracker = Depends(get_request_tracker),
) -> ApiResponse[ListingResponse]:
    """Fetch one page of a category listing."""
    source = await source_service.get_source(user_id, source_id)
    if page is None:
        page = await service.current_page(user_id, type_id)
    if jump is not None:
        page = jump_to(jump, page, await service.page_count(user_id, type_id))
    await service.remember_page(user_id, type_id, page)

    request = ListingRequest(
        source=source,
        category=CategoryDescriptor(type_id=type_id, type_parent_id=type_pid, name=type_name),
        page=page,
    )
    outcome = await service.fetch_current(request, tracker, scope=user_id)
    if outcome is None:
        raise ListingSupersededError(
            request.key, tracker.latest_key(view_scope(user_id, type_id))
        )

    if outcome.status == ListingStatus.SUCCESS:
        current, page_count = outcome.page.page, outcome.page.page_count
    else:
        current, page_count = page, max(await service.page_count(user_id, type_id), page)

    return ApiResponse.success(
        data=ListingResponse.from_outcome(
            outcome,
            page=current,
            page_count=page_count,
            previous_page=previous_page(current),
            next_page=next_page(current, page_count),
        )
    )


@router.get(
    "/layout",
    response_model=ApiResponse[GridColumnsResponse],
    summary="计算网格列数",
)
async def get_layout(
    count: int = Query(..., ge=0, description="结果数量"),
) -> ApiResponse[GridColumnsResponse]:
    """Grid columns for ``count`` results."""
    return ApiResponse.success(data=GridColumnsResponse.from_columns(select_columns(count)))

"""分类列表抓取服务。

协调 格式探测 -> 抓取 -> 解析 -> 归一化 的流程，并维护每次请求的状态：

    Idle -> Loading -> {Success, Empty, Failed}

任何异常都在这里消化掉，调用方最差拿到一个空的 ListingPage。
"""

import time
from dataclasses import dataclass, field
from urllib.parse import urlencode

from loguru import logger

from src.core.config import settings
from src.core.infrastructure.logging import BusinessEvents
from src.modules.listings.application.layout import GridColumns, select_columns
from src.modules.listings.application.navigation import LatestRequestTracker, view_scope
from src.modules.listings.application.normalizer import normalize_listing
from src.modules.listings.domain.entities import (
    ListingFormat,
    ListingPage,
    ListingRequest,
    ListingStatus,
)
from src.modules.listings.domain.exceptions import (
    ListingNetworkError,
    ListingParseError,
)
from src.modules.listings.domain.ports import CategoryPageStore, ProxyFetcher
from src.modules.listings.infrastructure.parsers import (
    IntermediateListing,
    detect_format,
    parse_json_text,
    parse_xml_listing,
    resolve_response_format,
)


def build_listing_url(
    base_url: str,
    type_id: int,
    page: int,
    page_size: int | None = None,
) -> str:
    """``<base>?ac=videolist&t=<type_id>&pg=<page>&pagesize=<n>``，JSON/XML 源相同。"""
    query = urlencode(
        {
            "ac": "videolist",
            "t": type_id,
            "pg": page,
            "pagesize": page_size or settings.LISTING_PAGE_SIZE,
        }
    )
    return f"{base_url}?{query}"


@dataclass
class ListingOutcome:
    """一次分类列表请求的结果。"""

    status: ListingStatus
    request_key: str
    page: ListingPage = field(default_factory=ListingPage.empty)
    error_message: str | None = None
    duration_ms: int = 0
    response_format: ListingFormat | None = None
    pagecount_declared: bool = False

    @property
    def records(self):
        return self.page.records

    @property
    def columns(self) -> GridColumns:
        return select_columns(self.page.count)

    @property
    def has_data(self) -> bool:
        return self.status == ListingStatus.SUCCESS and self.page.count > 0

    @classmethod
    def success(
        cls,
        request_key: str,
        page: ListingPage,
        duration_ms: int = 0,
        response_format: ListingFormat | None = None,
        pagecount_declared: bool = False,
    ) -> "ListingOutcome":
        return cls(
            status=ListingStatus.SUCCESS,
            request_key=request_key,
            page=page,
            duration_ms=duration_ms,
            response_format=response_format,
            pagecount_declared=pagecount_declared,
        )

    @classmethod
    def empty(
        cls,
        request_key: str,
        error_message: str | None = None,
        duration_ms: int = 0,
        response_format: ListingFormat | None = None,
    ) -> "ListingOutcome":
        return cls(
            status=ListingStatus.EMPTY,
            request_key=request_key,
            error_message=error_message,
            duration_ms=duration_ms,
            response_format=response_format,
        )

    @classmethod
    def failed(
        cls,
        request_key: str,
        error_message: str,
        duration_ms: int = 0,
        response_format: ListingFormat | None = None,
    ) -> "ListingOutcome":
        return cls(
            status=ListingStatus.FAILED,
            request_key=request_key,
            error_message=error_message,
            duration_ms=duration_ms,
            response_format=response_format,
        )


class ListingFetchService:
    """分类列表抓取服务。

    职责：
    - 拼接上游查询地址并通过代理抓取
    - 根据实际响应选择 XML / JSON 解析器
    - 归一化并注入来源信息
    - 在 Success 且上游声明了 pagecount 时更新分类总页数
    """

    def __init__(
        self,
        fetcher: ProxyFetcher,
        page_store: CategoryPageStore | None = None,
        page_size: int | None = None,
    ):
        self.fetcher = fetcher
        self.page_store = page_store
        self.page_size = page_size or settings.LISTING_PAGE_SIZE

    async def fetch(self, request: ListingRequest, scope: str | None = None) -> ListingOutcome:
        """Fetch one (source, category, page) listing. Never raises."""
        start_time = time.time()
        source = request.source
        type_id = request.category.type_id
        key = request.key

        hint = detect_format(source.url)
        target_url = build_listing_url(source.url, type_id, request.page, self.page_size)
        logger.info(f"Fetching listing {key} ({hint.value} hint): {target_url}")

        try:
            response = await self.fetcher.fetch(target_url)
        except ListingNetworkError as e:
            return self._failed(request, e.message, start_time)
        except Exception as e:
            logger.exception(f"Unexpected fetch error for {key}: {e}")
            return self._failed(request, f"Error: {e}", start_time)

        if not response.ok:
            duration_ms = self._elapsed_ms(start_time)
            message = f"HTTP {response.status_code}"
            logger.warning(f"Listing {key} returned {message}")
            BusinessEvents.listing_fetch_failed(
                source_id=source.id,
                type_id=type_id,
                page=request.page,
                status=ListingStatus.EMPTY.value,
                error=message,
            )
            return ListingOutcome.empty(key, message, duration_ms=duration_ms)

        response_format = resolve_response_format(response.content_type, response.text)
        if response_format != hint:
            logger.debug(
                f"Listing {key}: response is {response_format.value}, hint was {hint.value}"
            )

        try:
            intermediate = self._parse(response_format, response.text)
        except (ListingParseError, ValueError) as e:
            return self._failed(
                request, f"Parse error: {e}", start_time, response_format=response_format
            )
        except Exception as e:
            logger.exception(f"Unexpected parse error for {key}: {e}")
            return self._failed(
                request, f"Parse error: {e}", start_time, response_format=response_format
            )

        if not intermediate.well_formed:
            # 不记录为错误：很多采集站的外层包装不同
            logger.debug(f"Listing {key}: payload has no 'list' array")
            return ListingOutcome.empty(
                key,
                "Payload has no list array",
                duration_ms=self._elapsed_ms(start_time),
                response_format=response_format,
            )

        try:
            page = normalize_listing(intermediate, source)
        except Exception as e:
            logger.exception(f"Unexpected normalize error for {key}: {e}")
            return self._failed(
                request,
                f"Normalize error: {e}",
                start_time,
                response_format=response_format,
            )

        if intermediate.pagecount_declared and scope is not None:
            await self._remember_page_count(scope, type_id, page.page_count)

        duration_ms = self._elapsed_ms(start_time)
        BusinessEvents.listing_fetched(
            source_id=source.id,
            type_id=type_id,
            page=request.page,
            record_count=page.count,
            page_count=page.page_count,
            duration_ms=duration_ms,
        )
        return ListingOutcome.success(
            key,
            page,
            duration_ms=duration_ms,
            response_format=response_format,
            pagecount_declared=intermediate.pagecount_declared,
        )

    async def fetch_current(
        self,
        request: ListingRequest,
        tracker: LatestRequestTracker,
        scope: str,
    ) -> ListingOutcome | None:
        """Fetch and drop the outcome if a newer request for the same category view started.

        ``scope`` 标识用户（或会话），同一 scope 下不同分类互不替代。
        """
        view = view_scope(scope, request.category.type_id)
        tracker.begin(view, request.key)
        outcome = await self.fetch(request, scope=scope)
        if not tracker.complete(view, request.key, outcome.status):
            BusinessEvents.listing_discarded(
                request_key=request.key,
                latest_key=tracker.latest_key(view),
            )
            return None
        return outcome

    async def current_page(self, scope: str, type_id: int) -> int:
        """Remembered page for a category, 1 if none or unavailable."""
        if self.page_store is None:
            return 1
        try:
            page = await self.page_store.get_page(scope, type_id)
        except Exception as e:
            logger.warning(f"Failed to load page for category {type_id}: {e}")
            return 1
        return page if page and page >= 1 else 1

    async def remember_page(self, scope: str, type_id: int, page: int) -> None:
        if self.page_store is None:
            return
        try:
            await self.page_store.set_page(scope, type_id, page)
        except Exception as e:
            logger.warning(f"Failed to store page for category {type_id}: {e}")

    async def page_count(self, scope: str, type_id: int) -> int:
        """Known total pages for a category, 1 if none or unavailable."""
        if self.page_store is None:
            return 1
        try:
            page_count = await self.page_store.get_page_count(scope, type_id)
        except Exception as e:
            logger.warning(f"Failed to load page count for category {type_id}: {e}")
            return 1
        return page_count if page_count and page_count >= 1 else 1

    async def _remember_page_count(self, scope: str, type_id: int, page_count: int) -> None:
        if self.page_store is None:
            return
        try:
            await self.page_store.set_page_count(scope, type_id, page_count)
        except Exception as e:
            logger.warning(f"Failed to store page count for category {type_id}: {e}")

    @staticmethod
    def _parse(response_format: ListingFormat, text: str) -> IntermediateListing:
        if response_format == ListingFormat.XML:
            return parse_xml_listing(text)
        return parse_json_text(text)

    def _failed(
        self,
        request: ListingRequest,
        message: str,
        start_time: float,
        response_format: ListingFormat | None = None,
    ) -> ListingOutcome:
        logger.warning(f"Listing {request.key} failed: {message}")
        BusinessEvents.listing_fetch_failed(
            source_id=request.source.id,
            type_id=request.category.type_id,
            page=request.page,
            status=ListingStatus.FAILED.value,
            error=message,
        )
        return ListingOutcome.failed(
            request.key,
            message,
            duration_ms=self._elapsed_ms(start_time),
            response_format=response_format,
        )

    @staticmethod
    def _elapsed_ms(start_time: float) -> int:
        return int((time.time() - start_time) * 1000)

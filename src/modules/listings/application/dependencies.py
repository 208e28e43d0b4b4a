"""Listing module application dependencies."""

from typing import NoReturn

from fastapi import Depends

from src.core.config import settings
from src.modules.listings.application.fetch_service import ListingFetchService
from src.modules.listings.application.navigation import LatestRequestTracker
from src.modules.listings.domain.ports import CategoryPageStore, ProxyFetcher

_request_tracker = LatestRequestTracker(max_scopes=settings.LISTING_TRACKER_MAX_SCOPES)


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_proxy_fetcher() -> ProxyFetcher:
    _missing_dependency("ProxyFetcher")


async def get_category_page_store() -> CategoryPageStore:
    _missing_dependency("CategoryPageStore")


def get_request_tracker() -> LatestRequestTracker:
    return _request_tracker


async def get_listing_fetch_service(
    fetcher: ProxyFetcher = Depends(get_proxy_fetcher),
    page_store: CategoryPageStore = Depends(get_category_page_store),
) -> ListingFetchService:
    return ListingFetchService(fetcher=fetcher, page_store=page_store)

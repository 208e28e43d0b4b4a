"""Listing domain exceptions.

网络与解析异常只在流水线内部使用：ListingFetchService 会捕获它们并降级为空列表，
不会抛给调用方。
"""

from fastapi import status

from src.core.domain.exceptions import DomainException, UpstreamError


class ListingNetworkError(UpstreamError):
    """Transport failure or non-success upstream status."""

    error_code = "LISTING_NETWORK_ERROR"

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ListingParseError(UpstreamError):
    """Upstream XML payload is fundamentally malformed."""

    error_code = "LISTING_PARSE_ERROR"


class ListingShapeError(DomainException):
    """JSON payload without the expected ``list`` array."""

    error_code = "LISTING_SHAPE_ERROR"


class ListingSupersededError(DomainException):
    """A newer listing request for the same view finished first."""

    http_status_code = status.HTTP_409_CONFLICT
    error_code = "LISTING_SUPERSEDED"

    def __init__(self, request_key: str, latest_key: str | None = None):
        self.request_key = request_key
        self.latest_key = latest_key
        super().__init__(f"Listing request '{request_key}' was superseded")

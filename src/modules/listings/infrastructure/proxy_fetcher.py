"""httpx implementation of the proxy fetch boundary."""

import time

import httpx
from loguru import logger

from src.core.config import settings
from src.modules.listings.domain.exceptions import ListingNetworkError
from src.modules.listings.domain.ports import ProxyFetcher, ProxyResponse


class HttpxProxyFetcher(ProxyFetcher):
    """Fetch upstream listings, optionally through a forwarding proxy.

    配置了 proxy_endpoint 时请求 ``{proxy_endpoint}?url=<target>``，
    否则直接请求目标地址。非 2xx 状态码照常返回，由调用方决定如何处理。
    """

    def __init__(
        self,
        proxy_endpoint: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.proxy_endpoint = proxy_endpoint
        self.timeout = timeout or settings.FETCHER_TIMEOUT_SEC
        self.user_agent = user_agent or settings.FETCHER_USER_AGENT
        self._transport = transport

    async def fetch(self, target_url: str) -> ProxyResponse:
        start_time = time.time()
        if self.proxy_endpoint:
            request_url, params = self.proxy_endpoint, {"url": target_url}
        else:
            request_url, params = target_url, None

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    request_url,
                    params=params,
                    headers={
                        "User-Agent": self.user_agent,
                        "Accept": "application/json, application/xml, text/xml, */*",
                    },
                )
        except httpx.TimeoutException as e:
            logger.warning(f"Listing fetch timeout for {target_url}: {e}")
            raise ListingNetworkError(f"Timeout: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Listing fetch error for {target_url}: {e}")
            raise ListingNetworkError(f"Error: {e}") from e

        duration_ms = int((time.time() - start_time) * 1000)
        logger.debug(
            f"Fetched {target_url}: status={response.status_code}, duration={duration_ms}ms"
        )
        return ProxyResponse(
            status_code=response.status_code,
            content_type=response.headers.get("content-type", ""),
            text=response.text,
        )

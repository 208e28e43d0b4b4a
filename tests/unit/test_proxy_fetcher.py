"""代理抓取器单元测试（httpx.MockTransport）。"""

import httpx
import pytest

from src.modules.listings.domain.exceptions import ListingNetworkError
from src.modules.listings.infrastructure.proxy_fetcher import HttpxProxyFetcher

# 使用 anyio 作为异步测试后端
pytestmark = pytest.mark.anyio

TARGET = "http://x?ac=videolist&t=1&pg=1&pagesize=24"


class TestHttpxProxyFetcher:
    """HttpxProxyFetcher 测试。"""

    async def test_direct_fetch(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, headers={"content-type": "application/json"}, text='{"list":[]}'
            )

        fetcher = HttpxProxyFetcher(transport=httpx.MockTransport(handler))
        response = await fetcher.fetch(TARGET)

        assert response.ok
        assert response.status_code == 200
        assert response.content_type == "application/json"
        assert response.text == '{"list":[]}'
        assert str(seen[0].url) == TARGET
        assert "User-Agent" in seen[0].headers

    async def test_fetch_through_proxy(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, headers={"content-type": "text/xml"}, text="<rss/>")

        fetcher = HttpxProxyFetcher(
            proxy_endpoint="http://proxy.local/proxy",
            transport=httpx.MockTransport(handler),
        )
        response = await fetcher.fetch(TARGET)

        assert response.content_type == "text/xml"
        assert seen[0].url.host == "proxy.local"
        assert seen[0].url.path == "/proxy"
        assert seen[0].url.params["url"] == TARGET

    async def test_non_success_status_returned(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="not found")

        fetcher = HttpxProxyFetcher(transport=httpx.MockTransport(handler))
        response = await fetcher.fetch(TARGET)

        assert response.status_code == 404
        assert response.ok is False
        assert response.content_type == "text/plain; charset=utf-8"

    async def test_timeout_raises_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        fetcher = HttpxProxyFetcher(transport=httpx.MockTransport(handler))
        with pytest.raises(ListingNetworkError) as exc_info:
            await fetcher.fetch(TARGET)
        assert exc_info.value.message.startswith("Timeout")

    async def test_connect_error_raises_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        fetcher = HttpxProxyFetcher(transport=httpx.MockTransport(handler))
        with pytest.raises(ListingNetworkError):
            await fetcher.fetch(TARGET)

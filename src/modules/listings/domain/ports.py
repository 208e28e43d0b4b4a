"""Listing ports (capabilities consumed by the pipeline)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ProxyResponse:
    """代理返回的原始响应。"""

    status_code: int
    content_type: str
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ProxyFetcher(ABC):
    """Fetch bytes for a target URL through the proxy boundary."""

    @abstractmethod
    async def fetch(self, target_url: str) -> ProxyResponse:
        """Fetch the target URL.

        Raises:
            ListingNetworkError: 传输层失败（连接、超时等）
        """


class CategoryPageStore(ABC):
    """Caller-owned side table: 每个分类的当前页码与总页数。

    scope 通常是用户 ID 或会话 ID。
    """

    @abstractmethod
    async def get_page(self, scope: str, type_id: int) -> int | None: ...

    @abstractmethod
    async def set_page(self, scope: str, type_id: int, page: int) -> None: ...

    @abstractmethod
    async def get_page_count(self, scope: str, type_id: int) -> int | None: ...

    @abstractmethod
    async def set_page_count(self, scope: str, type_id: int, page_count: int) -> None: ...

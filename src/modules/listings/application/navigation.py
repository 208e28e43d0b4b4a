"""Caller-side pagination helpers.

页码状态属于调用方：这里只提供翻页规则和"最后一次请求为准"的判定。
"""

from collections import OrderedDict
from dataclasses import dataclass

from src.modules.listings.domain.entities import ListingStatus


def previous_page(current: int) -> int:
    return current - 1 if current > 1 else current


def next_page(current: int, page_count: int) -> int:
    return current + 1 if current < page_count else current


def jump_to(raw: str | int | None, current: int, page_count: int) -> int:
    """Page typed into the jump box; keeps ``current`` for invalid input."""
    if raw is None or isinstance(raw, bool):
        return current
    try:
        page = int(str(raw).strip())
    except ValueError:
        return current
    if 1 <= page <= page_count:
        return page
    return current


@dataclass
class _TrackedRequest:
    key: str
    status: ListingStatus


DEFAULT_MAX_SCOPES = 10_000


def view_scope(scope: str, type_id: int) -> str:
    """Tracker scope for one category view of a user or session."""
    return f"{scope}:{type_id}"


class LatestRequestTracker:
    """Last-request-wins by key, per scope.

    没有取消机制：被替代的请求照常完成，其结果由 is_current() 判定后丢弃。
    scope 一般是分类视图（用户 + 分类，见 view_scope）。
    最多保留 max_scopes 个 scope，超出时淘汰最久未开始请求的 scope。
    """

    def __init__(self, max_scopes: int = DEFAULT_MAX_SCOPES) -> None:
        if max_scopes < 1:
            raise ValueError(f"max_scopes must be >= 1, got {max_scopes}")
        self.max_scopes = max_scopes
        self._latest: OrderedDict[str, _TrackedRequest] = OrderedDict()

    def __len__(self) -> int:
        return len(self._latest)

    def begin(self, scope: str, key: str) -> None:
        """Idle/any -> Loading for a new key."""
        self._latest[scope] = _TrackedRequest(key=key, status=ListingStatus.LOADING)
        self._latest.move_to_end(scope)
        while len(self._latest) > self.max_scopes:
            self._latest.popitem(last=False)

    def complete(self, scope: str, key: str, status: ListingStatus) -> bool:
        """Record the terminal status; False when the key was superseded."""
        if not status.is_terminal:
            raise ValueError(f"{status} is not a terminal status")
        tracked = self._latest.get(scope)
        if tracked is None or tracked.key != key:
            return False
        tracked.status = status
        return True

    def is_current(self, scope: str, key: str) -> bool:
        tracked = self._latest.get(scope)
        return tracked is not None and tracked.key == key

    def latest_key(self, scope: str) -> str | None:
        tracked = self._latest.get(scope)
        return tracked.key if tracked else None

    def status(self, scope: str) -> ListingStatus:
        tracked = self._latest.get(scope)
        return tracked.status if tracked else ListingStatus.IDLE

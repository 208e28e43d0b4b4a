"""Shared shape for listing parsers."""

import math
import re
from dataclasses import dataclass, field
from typing import Any

# parseInt 语义：只取前导整数部分（"3页" -> 3）
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass
class IntermediateListing:
    """解析器输出的中间结构（尚未注入来源信息）。

    records 中的 key 使用上游约定的字段名：vod_id / vod_name / vod_pic ...
    """

    records: list[dict[str, Any]] = field(default_factory=list)
    page: int = 1
    pagecount: int = 1
    pagecount_declared: bool = False
    # False：外层结构不符合预期（list 不是数组）
    well_formed: bool = True

    @classmethod
    def empty(cls, well_formed: bool = True) -> "IntermediateListing":
        return cls(well_formed=well_formed)


def coerce_int(value: object) -> int | None:
    """Best-effort integer conversion; None when the value is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match is None:
            return None
        return int(match.group(1))
    return None

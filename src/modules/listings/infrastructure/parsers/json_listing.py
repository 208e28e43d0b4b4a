"""JSON 采集接口解析器。

JSON 源的字段名已经是上游约定的字段名（vod_id / vod_name ...），这里不做改名，
只校验外层结构。
"""

import json
from typing import Any

from loguru import logger

from src.modules.listings.domain.exceptions import ListingShapeError
from src.modules.listings.infrastructure.parsers.base import (
    IntermediateListing,
    coerce_int,
)


def parse_json_listing(payload: Any) -> IntermediateListing:
    """Parse an already-decoded JSON listing payload.

    Never raises: a payload whose ``list`` member is not an array yields an
    empty listing with page=1 and pagecount=1.
    """
    try:
        items = _extract_list(payload)
    except ListingShapeError as e:
        # 各家包装方式不一，属于预期内的情况
        logger.debug(f"JSON listing shape mismatch: {e.message}")
        return IntermediateListing.empty(well_formed=False)

    pagecount = coerce_int(payload.get("pagecount"))
    page = coerce_int(payload.get("page"))
    return IntermediateListing(
        records=list(items),
        page=page or 1,
        pagecount=pagecount or 1,
        pagecount_declared=pagecount is not None,
    )


def parse_json_text(text: str) -> IntermediateListing:
    """Decode a JSON body and parse it.

    Raises:
        ValueError: body is not valid JSON
    """
    return parse_json_listing(json.loads(text))


def _extract_list(payload: Any) -> list[Any] | tuple[Any, ...]:
    if not isinstance(payload, dict):
        raise ListingShapeError(f"payload must be an object, got {type(payload).__name__}")
    items = payload.get("list")
    if not isinstance(items, list | tuple):
        raise ListingShapeError(f"'list' must be an array, got {type(items).__name__}")
    return items

"""Listing normalizer: 中间结构 -> ListingPage。

与格式无关：调用方已根据实际响应选定解析器，这里只处理解析后的中间结构。
"""

from itertools import zip_longest
from typing import Any

from loguru import logger
from pydantic import ValidationError

from src.modules.listings.domain.entities import ListingPage, VideoRecord
from src.modules.listings.infrastructure.parsers.base import IntermediateListing
from src.modules.sources.domain.entities import SourceDescriptor

PLAY_GROUP_SEPARATOR = "$$$"
DEFAULT_PLAY_SOURCE = "default"

# 上游字段名 -> VideoRecord 字段名
OPTIONAL_FIELDS: tuple[tuple[str, str], ...] = (
    ("vod_pic", "picture_url"),
    ("vod_year", "year"),
    ("vod_area", "area"),
    ("type_name", "type_name"),
    ("vod_director", "director"),
    ("vod_actor", "actor"),
    ("vod_remarks", "remarks"),
    ("vod_content", "content"),
)


def normalize_listing(
    intermediate: IntermediateListing,
    source: SourceDescriptor,
) -> ListingPage:
    """Stamp source identity onto every record and validate pagination."""
    records: list[VideoRecord] = []
    for raw in intermediate.records:
        record = normalize_record(raw, source)
        if record is not None:
            records.append(record)

    dropped = len(intermediate.records) - len(records)
    if dropped:
        logger.debug(f"Dropped {dropped} records without usable vod_id from {source.id}")

    return ListingPage(
        records=tuple(records),
        page=max(intermediate.page, 1),
        page_count=max(intermediate.pagecount, 1),
    )


def normalize_record(raw: Any, source: SourceDescriptor) -> VideoRecord | None:
    """Map one upstream record; None when it has no usable vod_id."""
    if not isinstance(raw, dict):
        return None

    vod_id = _as_text(raw.get("vod_id"))
    if not vod_id or not vod_id.strip():
        return None

    play_urls, play_sources = align_play_groups(
        raw.get("vod_play_url"), raw.get("vod_play_from")
    )
    fields: dict[str, Any] = {
        target: _as_text(raw.get(key)) for key, target in OPTIONAL_FIELDS
    }

    try:
        return VideoRecord(
            vod_id=vod_id.strip(),
            # 来源信息总是以请求方为准，覆盖上游同名字段
            source_id=source.id,
            source_name=source.name,
            source_url=source.url,
            name=_as_text(raw.get("vod_name")) or "",
            play_urls=play_urls,
            play_sources=play_sources,
            **fields,
        )
    except ValidationError as e:
        logger.debug(f"Skipping record {vod_id} from {source.id}: {e}")
        return None


def align_play_groups(urls: Any, sources: Any) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Pair play URL groups with their source labels.

    Accepts either parallel sequences (XML) or ``$$$``-joined strings (JSON).
    Blank groups are dropped from both sides so indexes stay aligned.
    """
    url_groups = _split_groups(urls)
    source_groups = _split_groups(sources)

    paired_urls: list[str] = []
    paired_sources: list[str] = []
    for url, label in zip_longest(url_groups, source_groups):
        if url is None:
            break
        url = url.strip()
        if not url:
            continue
        paired_urls.append(url)
        paired_sources.append((label or "").strip() or DEFAULT_PLAY_SOURCE)
    return tuple(paired_urls), tuple(paired_sources)


def _split_groups(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split(PLAY_GROUP_SEPARATOR) if value else []
    if isinstance(value, list | tuple):
        return [_as_text(item) or "" for item in value]
    return []


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int | float):
        return str(value)
    return None

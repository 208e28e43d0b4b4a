"""XML 采集接口解析器。

XML 格式示例::

    <list page="1" pagecount="20">
      <video>
        <id>1</id><name>...</name><pic>...</pic><type>...</type>
        <year>...</year><area>...</area><director>...</director>
        <actor>...</actor><note>...</note><des>...</des>
        <dl><dd flag="m3u8">第1集$http://...#第2集$http://...</dd></dl>
      </video>
    </list>
"""

from typing import Any
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring
from loguru import logger

from src.modules.listings.domain.exceptions import ListingParseError
from src.modules.listings.infrastructure.parsers.base import (
    IntermediateListing,
    coerce_int,
)

DEFAULT_PLAY_FLAG = "default"

# 标签 -> 上游字段名
FIELD_TAGS: tuple[tuple[str, str], ...] = (
    ("id", "vod_id"),
    ("name", "vod_name"),
    ("pic", "vod_pic"),
    ("type", "type_name"),
    ("year", "vod_year"),
    ("area", "vod_area"),
    ("director", "vod_director"),
    ("actor", "vod_actor"),
    ("note", "vod_remarks"),
    ("des", "vod_content"),
)


def parse_xml_listing(text: str) -> IntermediateListing:
    """Parse an XML listing document.

    Missing optional elements are tolerated; a document that cannot be parsed at
    all raises ListingParseError.
    """
    try:
        root = fromstring(text.lstrip("\ufeff").strip())
    except (ParseError, DefusedXmlException) as e:
        raise ListingParseError(f"Malformed XML listing: {e}") from e

    records = [_parse_video(video) for video in root.iter("video")]
    page, pagecount, declared = _parse_pagination(root)

    logger.debug(f"Parsed XML listing: videos={len(records)}, page={page}/{pagecount}")
    return IntermediateListing(
        records=records,
        page=page,
        pagecount=pagecount,
        pagecount_declared=declared,
    )


def _parse_video(video: Element) -> dict[str, Any]:
    record: dict[str, Any] = {}
    for tag, field_name in FIELD_TAGS:
        value = _first_text(video, tag)
        if value is not None:
            record[field_name] = value

    play_urls, play_sources = _parse_play_groups(video)
    record["vod_play_url"] = play_urls
    record["vod_play_from"] = play_sources
    return record


def _first_text(parent: Element, tag: str) -> str | None:
    """Text content of the first descendant with the given tag, None if absent."""
    element = parent.find(f".//{tag}")
    if element is None:
        return None
    return "".join(element.itertext())


def _parse_play_groups(video: Element) -> tuple[list[str], list[str]]:
    play_urls: list[str] = []
    play_sources: list[str] = []
    for dl in video.iter("dl"):
        for dd in dl.iter("dd"):
            urls = "".join(dd.itertext()).strip()
            # 空分组两边都不写入，保持下标对齐
            if not urls:
                continue
            play_urls.append(urls)
            play_sources.append(dd.get("flag") or DEFAULT_PLAY_FLAG)
    return play_urls, play_sources


def _parse_pagination(root: Element) -> tuple[int, int, bool]:
    list_element = root if root.tag == "list" else root.find(".//list")
    if list_element is None:
        return 1, 1, False

    page = coerce_int(list_element.get("page"))
    pagecount = coerce_int(list_element.get("pagecount"))
    return page or 1, pagecount or 1, pagecount is not None

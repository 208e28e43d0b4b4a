"""采集接口响应解析器。"""

from src.modules.listings.infrastructure.parsers.base import (
    IntermediateListing,
    coerce_int,
)
from src.modules.listings.infrastructure.parsers.detector import (
    detect_format,
    resolve_response_format,
)
from src.modules.listings.infrastructure.parsers.json_listing import (
    parse_json_listing,
    parse_json_text,
)
from src.modules.listings.infrastructure.parsers.xml_listing import parse_xml_listing

__all__ = [
    "IntermediateListing",
    "coerce_int",
    "detect_format",
    "parse_json_listing",
    "parse_json_text",
    "parse_xml_listing",
    "resolve_response_format",
]

"""Format detection for upstream listing sources."""

from src.core.config import settings
from src.modules.listings.domain.entities import ListingFormat

XML_DECLARATION = "<?xml"


def detect_format(base_url: str, marker: str | None = None) -> ListingFormat:
    """Pre-fetch hint: XML when the base URL carries the reserved XML path marker."""
    marker = marker or settings.XML_SOURCE_MARKER
    if marker in base_url:
        return ListingFormat.XML
    return ListingFormat.JSON


def resolve_response_format(content_type: str | None, body: str) -> ListingFormat:
    """Authoritative check on the actual response.

    Content type wins when it mentions xml, otherwise the trimmed body is sniffed
    for an XML declaration.
    """
    if content_type and "xml" in content_type.lower():
        return ListingFormat.XML
    if body.lstrip("\ufeff").strip().startswith(XML_DECLARATION):
        return ListingFormat.XML
    return ListingFormat.JSON

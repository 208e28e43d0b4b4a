"""Source domain exceptions."""

from src.core.domain.exceptions import DomainException, EntityNotFoundError


class SourceNotFoundError(EntityNotFoundError):
    """Raised when source is not found."""

    def __init__(self, source_id: str | None = None):
        super().__init__("Source", source_id)


class InvalidSourceError(DomainException):
    """Raised when a source descriptor is invalid."""

    error_code = "INVALID_SOURCE"

    def __init__(self, message: str):
        super().__init__(f"Invalid source: {message}")

"""Errors raised while turning raw CMS records into typed records.

Only the serializers raise. Everything else in ``site_content.core`` is total
and answers bad input with a safe default.

Example:
    from site_content.core.errors import ContentError, classify_error

    try:
        video = serialize_video(raw)
    except ContentError as ex:
        logger.warning("record_skipped", reason=classify_error(ex).name)
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Why a record was rejected."""

    MISSING_FIELD = auto()  # A mandatory field is absent or empty
    INVALID_SHAPE = auto()  # Not a JSON object at all
    UNKNOWN = auto()


class ContentError(Exception):
    """Base class for record-level content failures.

    Attributes:
        record_id: The offending record's ``_id`` when it could be read.
    """

    category = ErrorCategory.UNKNOWN

    def __init__(self, message: str, record_id: str | None = None) -> None:
        super().__init__(message)
        self.record_id = record_id


class MissingRequiredFieldError(ContentError):
    """A mandatory field is absent or empty.

    Attributes:
        missing_fields: Raw field paths that failed, in check order.
        kind: Record kind used in the message, e.g. "video".
    """

    category = ErrorCategory.MISSING_FIELD

    def __init__(
        self,
        missing_fields: tuple[str, ...],
        record_id: str | None = None,
        kind: str = "record",
    ) -> None:
        message = f"Missing required fields in {kind} data: {', '.join(missing_fields)}"
        if record_id:
            message += f" (id={record_id})"
        super().__init__(message, record_id=record_id)
        self.missing_fields = missing_fields
        self.kind = kind


class InvalidContentError(ContentError):
    """The payload is not a mapping, so no field can be read."""

    category = ErrorCategory.INVALID_SHAPE


def classify_error(error: Exception) -> ErrorCategory:
    """Map an exception to the category used in skip logs and tallies."""
    if isinstance(error, ContentError):
        return error.category
    return ErrorCategory.UNKNOWN

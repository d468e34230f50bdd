"""
Filter Failures - Error Taxonomy for Filter Manipulation.

Every failure raised by filterkit is classified by FilterErrorKind.

Failure kinds:
- UndefinedValue: a mutation referenced a value outside the filter's values
- FilterNotFound: an update referenced a raw key absent from the collection
- ParseError: a raw map could not be converted to filters (strict mode)
- RawConversionError: filters could not be converted to a raw map (strict mode)

INVARIANT: No failure is fatal. Every failing operation leaves the
prior state unchanged (no partial mutation).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class FilterErrorKind(str, Enum):
    """Classification of filter failures."""

    UNDEFINED_VALUE = "undefined_value"
    PARSE_ERROR = "parse_error"
    RAW_CONVERSION_ERROR = "raw_conversion_error"
    FILTER_NOT_FOUND = "filter_not_found"


# Standard messages - fixed per kind
STANDARD_MESSAGES: dict[FilterErrorKind, str] = {
    FilterErrorKind.UNDEFINED_VALUE: "selected value is not allowed for this filter",
    FilterErrorKind.PARSE_ERROR: "could not parse filters from raw model",
    FilterErrorKind.RAW_CONVERSION_ERROR: "could not encode filters to raw model",
    FilterErrorKind.FILTER_NOT_FOUND: "could not find filter to modify",
}


class FailureDetail(BaseModel):
    """Serializable description of a filter failure."""

    kind: FilterErrorKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Standard message for the failure kind",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )


class FilterError(Exception):
    """
    Base class for filter failures.

    The message is standardized per kind. Only the detail varies.
    """

    def __init__(self, kind: FilterErrorKind, detail: str | None = None):
        self.kind = kind
        self.message = STANDARD_MESSAGES[kind]
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)

    def to_failure_detail(self) -> FailureDetail:
        """Convert to a FailureDetail for reporting to API callers."""
        return FailureDetail(kind=self.kind, message=self.message, detail=self.detail)


class UndefinedValueError(FilterError):
    """Raised when a value is not among a filter's possible values."""

    def __init__(self, raw_key: str, value: Any):
        self.raw_key = raw_key
        self.value = value
        super().__init__(
            FilterErrorKind.UNDEFINED_VALUE,
            detail=f"'{value}' is not a value of filter '{raw_key}'",
        )


class FilterNotFoundError(FilterError):
    """Raised when no filter in a collection shares the given raw key."""

    def __init__(self, raw_key: str):
        self.raw_key = raw_key
        super().__init__(
            FilterErrorKind.FILTER_NOT_FOUND,
            detail=f"no filter with raw key '{raw_key}'",
        )


class ParseError(FilterError):
    """Raised by strict conversions when a raw map entry cannot become a filter."""

    def __init__(self, detail: str):
        super().__init__(FilterErrorKind.PARSE_ERROR, detail=detail)


class RawConversionError(FilterError):
    """Raised by strict conversions when filters cannot become a raw map."""

    def __init__(self, detail: str):
        super().__init__(FilterErrorKind.RAW_CONVERSION_ERROR, detail=detail)

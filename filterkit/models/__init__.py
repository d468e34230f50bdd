from filterkit.models.erased_value import ErasedValue, ValueKind, erase, is_equatable
from filterkit.models.failure import (
    STANDARD_MESSAGES,
    FailureDetail,
    FilterError,
    FilterErrorKind,
    FilterNotFoundError,
    ParseError,
    RawConversionError,
    UndefinedValueError,
)
from filterkit.models.filter import Filter, FilterRepresentationScope
from filterkit.models.filter_key import FilterKey
from filterkit.models.filterable import Accessor, Filterable, field_accessor

__all__ = [
    "Accessor",
    "ErasedValue",
    "FailureDetail",
    "Filter",
    "FilterError",
    "FilterErrorKind",
    "FilterKey",
    "FilterNotFoundError",
    "FilterRepresentationScope",
    "Filterable",
    "ParseError",
    "RawConversionError",
    "STANDARD_MESSAGES",
    "UndefinedValueError",
    "ValueKind",
    "erase",
    "field_accessor",
    "is_equatable",
]

"""Type-erased filtering of in-memory objects by field values."""

from filterkit.filtering import (
    FilterApplyMetrics,
    FilterRepresentationScope,
    RawFilterSet,
    activate_all,
    active_values_only,
    as_erased_value_map,
    as_erased_values,
    as_raw_filters,
    build_filters,
    deactivate_all,
    filter_for,
    filtered,
    get_apply_metrics,
    matching,
    reset_apply_metrics,
    update_filter,
)
from filterkit.models import (
    Accessor,
    ErasedValue,
    Filter,
    Filterable,
    FilterError,
    FilterErrorKind,
    FilterKey,
    FilterNotFoundError,
    ParseError,
    RawConversionError,
    UndefinedValueError,
    erase,
    field_accessor,
)

__all__ = [
    "Accessor",
    "ErasedValue",
    "Filter",
    "FilterApplyMetrics",
    "FilterError",
    "FilterErrorKind",
    "FilterKey",
    "FilterNotFoundError",
    "FilterRepresentationScope",
    "Filterable",
    "ParseError",
    "RawConversionError",
    "RawFilterSet",
    "UndefinedValueError",
    "activate_all",
    "active_values_only",
    "as_erased_value_map",
    "as_erased_values",
    "as_raw_filters",
    "build_filters",
    "deactivate_all",
    "erase",
    "field_accessor",
    "filter_for",
    "filtered",
    "get_apply_metrics",
    "matching",
    "reset_apply_metrics",
    "update_filter",
]

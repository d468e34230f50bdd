"""
Filter collection operations.

- collection: lookup, update and bulk activation over lists of filters
- raw: conversion between raw filter maps and filters
- apply: reducing object collections by filters
"""

from filterkit.filtering.apply import (
    FilterApplyMetrics,
    filtered,
    get_apply_metrics,
    matching,
    reset_apply_metrics,
)
from filterkit.filtering.collection import (
    activate_all,
    active_values_only,
    deactivate_all,
    filter_for,
    update_filter,
)
from filterkit.filtering.raw import (
    RawFilters,
    RawFilterSet,
    as_erased_value_map,
    as_erased_values,
    as_raw_filters,
    build_filters,
)
from filterkit.models.filter import FilterRepresentationScope

__all__ = [
    # Apply
    "FilterApplyMetrics",
    "filtered",
    "get_apply_metrics",
    "matching",
    "reset_apply_metrics",
    # Collection
    "activate_all",
    "active_values_only",
    "deactivate_all",
    "filter_for",
    "update_filter",
    # Raw maps
    "FilterRepresentationScope",
    "RawFilterSet",
    "RawFilters",
    "as_erased_value_map",
    "as_erased_values",
    "as_raw_filters",
    "build_filters",
]

"""
Raw Filter Maps - Conversion Between Wire Maps and Filters.

Filter sets are exchanged with external APIs as plain maps of
field name → list of loosely typed values, e.g.:

    {"age": [10, 11, 12], "gender": ["male", "female"]}

Parsing is PERMISSIVE by default:
- Keys the filterable type does not recognize are dropped
- Values that do not support equality are dropped

With strict=True, the first dropped entry raises ParseError instead.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import RootModel, ValidationError

from filterkit.config import settings
from filterkit.models.erased_value import ErasedValue, erase
from filterkit.models.failure import ParseError, RawConversionError
from filterkit.models.filter import Filter, FilterRepresentationScope
from filterkit.models.filterable import Filterable

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Filterable)

# Wire-level shape of a filter set
RawFilters = dict[str, list[Any]]


def as_erased_values(values: Iterable[Any]) -> list[ErasedValue]:
    """
    Erase a sequence of raw values.

    Values that do not support equality are removed.
    """
    erased_values: list[ErasedValue] = []
    for value in values:
        erased = erase(value)
        if erased is not None:
            erased_values.append(erased)
    return erased_values


def as_erased_value_map(raw: Mapping[str, Iterable[Any]]) -> dict[str, list[ErasedValue]]:
    """Erase every value list in a raw map, keeping all keys."""
    return {key: as_erased_values(values) for key, values in raw.items()}


def _drop(raw_key: str, reason: str, strict: bool, **extra: Any) -> None:
    """Record a dropped raw entry, or raise ParseError in strict mode."""
    if strict:
        raise ParseError(f"'{raw_key}': {reason}")

    logger.debug(
        "raw_filter_dropped",
        extra={"raw_key": raw_key, "reason": reason, **extra},
    )


def build_filters(
    raw: Mapping[str, Sequence[Any]],
    filterable_type: type[T],
    *,
    strict: bool | None = None,
) -> list[Filter[T]]:
    """
    Convert a raw filter map into filters bound to a filterable type.

    Each key is resolved through filterable_type.keypath_for(). The
    collapse policy of every filter comes from
    filterable_type.dismiss_active_values_when_all_are_selected().

    Args:
        raw: Map of field name → possible raw values
        filterable_type: The Filterable type the filters apply to
        strict: Raise instead of dropping (defaults to settings)

    Returns:
        Filters in the iteration order of raw, with no active values

    Raises:
        ParseError: In strict mode, on an unrecognized key, a value list that
            is not a sequence, or a value that does not support equality
    """
    if strict is None:
        strict = settings.strict_raw_conversion

    filters: list[Filter[T]] = []

    for raw_key, raw_values in raw.items():
        accessor = filterable_type.keypath_for(raw_key)
        if accessor is None:
            _drop(raw_key, "unrecognized_key", strict, filterable_type=filterable_type.__name__)
            continue

        if isinstance(raw_values, (str, bytes)) or not isinstance(raw_values, Iterable):
            _drop(raw_key, "values_not_a_sequence", strict)
            continue

        raw_values = list(raw_values)
        values = as_erased_values(raw_values)
        dropped = len(raw_values) - len(values)
        if dropped:
            _drop(raw_key, "non_equatable_values", strict, dropped_values=dropped)

        filters.append(
            Filter(
                raw_key=raw_key,
                comparison_target=accessor,
                values=values,
                dismiss_values_when_all_are_selected=(
                    filterable_type.dismiss_active_values_when_all_are_selected(raw_key)
                ),
            )
        )

    logger.info(
        "filters_built",
        extra={
            "filterable_type": filterable_type.__name__,
            "raw_keys": len(raw),
            "filters": len(filters),
        },
    )

    return filters


def as_raw_filters(
    filters: Iterable[Filter[Any]],
    scope: FilterRepresentationScope = FilterRepresentationScope.ALL,
    *,
    strict: bool | None = None,
) -> RawFilters:
    """
    Convert filters back into a raw filter map.

    Args:
        filters: Filters to convert
        scope: ALL emits every possible value, ACTIVE only the active ones
        strict: Raise on duplicate raw keys (defaults to settings).
            When not strict, later filters overwrite earlier ones.

    Returns:
        Map of raw key → list of raw values

    Raises:
        RawConversionError: In strict mode, when two filters share a raw key
    """
    if strict is None:
        strict = settings.strict_raw_conversion

    raw_filters: RawFilters = {}
    for filter_ in filters:
        if strict and filter_.raw_key in raw_filters:
            raise RawConversionError(f"duplicate raw key '{filter_.raw_key}'")
        raw_filters.update(filter_.as_dictionary(scope))

    return raw_filters


class RawFilterSet(RootModel[RawFilters]):
    """
    Validated wire-level filter map.

    Usage:
        raw_set = RawFilterSet.from_json(response_body)
        filters = raw_set.to_filters(Person)
        ...
        payload = RawFilterSet.from_filters(filters, FilterRepresentationScope.ACTIVE)
        request_body = payload.model_dump_json()
    """

    @classmethod
    def parse(cls, data: Any) -> "RawFilterSet":
        """
        Validate an already decoded payload.

        Raises:
            ParseError: If data is not a map of string → list
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"invalid raw filter map ({e.error_count()} errors)") from e

    @classmethod
    def from_json(cls, payload: str | bytes) -> "RawFilterSet":
        """
        Validate a JSON payload.

        Raises:
            ParseError: If payload is not JSON for a map of string → list
        """
        try:
            return cls.model_validate_json(payload)
        except ValidationError as e:
            raise ParseError(f"invalid raw filter JSON ({e.error_count()} errors)") from e

    @classmethod
    def from_filters(
        cls,
        filters: Iterable[Filter[Any]],
        scope: FilterRepresentationScope = FilterRepresentationScope.ALL,
        *,
        strict: bool | None = None,
    ) -> "RawFilterSet":
        return cls(as_raw_filters(filters, scope, strict=strict))

    def to_filters(self, filterable_type: type[T], *, strict: bool | None = None) -> list[Filter[T]]:
        return build_filters(self.root, filterable_type, strict=strict)

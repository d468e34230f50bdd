"""
Filter collection operations - lookup, update and bulk activation.

A filter collection is a plain list of Filter objects, keyed by raw_key.

INVARIANTS:
- raw_key is expected to be unique within a collection
- Lookup returns the first filter with a matching raw_key
- A failed update leaves the collection unchanged
"""

import logging
from collections.abc import Iterable
from typing import TypeVar

from filterkit.models.failure import FilterNotFoundError
from filterkit.models.filter import Filter

logger = logging.getLogger(__name__)

T = TypeVar("T")


def filter_for(filters: Iterable[Filter[T]], raw_key: str) -> Filter[T] | None:
    """Return the first filter with the given raw key, or None."""
    for filter_ in filters:
        if filter_.raw_key == raw_key:
            return filter_
    return None


def update_filter(filters: list[Filter[T]], updated: Filter[T]) -> None:
    """
    Replace the first filter sharing updated.raw_key, in place.

    Later elements with the same raw key are left untouched.

    Raises:
        FilterNotFoundError: If no filter in the list has that raw key
    """
    for position, filter_ in enumerate(filters):
        if filter_.raw_key == updated.raw_key:
            filters[position] = updated
            break
    else:
        raise FilterNotFoundError(updated.raw_key)

    logger.debug(
        "filter_updated",
        extra={"raw_key": updated.raw_key, "active_values": len(updated.active_values)},
    )


def active_values_only(filters: Iterable[Filter[T]]) -> list[Filter[T]]:
    """Return only the filters that have at least one active value."""
    return [filter_ for filter_ in filters if filter_.active_values]


def activate_all(filters: Iterable[Filter[T]]) -> list[Filter[T]]:
    """Return copies of the filters with every value active."""
    return [filter_.as_all_values_activated() for filter_ in filters]


def deactivate_all(filters: Iterable[Filter[T]]) -> list[Filter[T]]:
    """Return copies of the filters with no active values."""
    return [filter_.as_all_values_deactivated() for filter_ in filters]

"""
Filter application - reduce a collection of objects by a set of filters.

Matching semantics:
- AND across filters: an object survives only if every filter matches
- OR within a filter: any active value may match
- A filter with no active values matches everything

INVARIANTS:
- Order of surviving objects is preserved
- Inputs are never mutated
- No filters → every object survives
"""

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from filterkit.config import settings
from filterkit.models.filter import Filter

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class FilterApplyMetrics:
    """Metrics recorded per filtered() call."""

    total_objects: int = 0
    filter_count: int = 0
    active_filter_count: int = 0
    matched_objects: int = 0


# Module-level metrics accumulator, bounded to the most recent calls
_metrics_history: deque[FilterApplyMetrics] = deque(maxlen=settings.apply_metrics_history_size)


def get_apply_metrics() -> list[FilterApplyMetrics]:
    """Get all recorded metrics."""
    return list(_metrics_history)


def reset_apply_metrics() -> None:
    """Reset metrics history (for testing)."""
    _metrics_history.clear()


def matching(objects: Iterable[T], filter_: Filter[T]) -> list[T]:
    """Return the objects matched by a single filter, in input order."""
    return [obj for obj in objects if filter_.matches(obj)]


def filtered(objects: Iterable[T], filters: Sequence[Filter[T]]) -> list[T]:
    """
    Return the objects matched by every filter.

    Args:
        objects: Candidate objects
        filters: Filters bound to the objects' type

    Returns:
        New list of matching objects, in input order
    """
    candidates = list(objects)
    result = [obj for obj in candidates if all(f.matches(obj) for f in filters)]

    metrics = FilterApplyMetrics(
        total_objects=len(candidates),
        filter_count=len(filters),
        active_filter_count=sum(1 for f in filters if f.active_values),
        matched_objects=len(result),
    )

    if settings.record_apply_metrics:
        _metrics_history.append(metrics)

    logger.debug(
        "filters_applied",
        extra={
            "total": metrics.total_objects,
            "filters": metrics.filter_count,
            "active_filters": metrics.active_filter_count,
            "matched": metrics.matched_objects,
        },
    )

    return result

"""
Filter - one field's possible values, its active subset and the match predicate.

A Filter is bound to a filterable type through its comparison target,
an accessor resolved once at construction.

Activation states:
- no-filter: active_values is empty (accepts everything)
- partial-filter: a proper non-empty subset is active
- all-selected: every value is active; collapses to no-filter after
  toggle/activate when dismiss_values_when_all_are_selected is set

INVARIANTS:
- active_values is always a subset of values
- Mutations with a value outside values raise UndefinedValueError
  and leave active_values untouched
- An empty active set and a full active set both mean "accept everything"
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Generic, TypeVar

from filterkit.config import ALL_VALUES_LABEL, settings
from filterkit.models.erased_value import ErasedValue, erase
from filterkit.models.failure import UndefinedValueError
from filterkit.models.filterable import Accessor

T = TypeVar("T")


class FilterRepresentationScope(str, Enum):
    """Which values a raw representation of a filter carries."""

    ALL = "all"
    ACTIVE = "active"


def _contains(values: Iterable[ErasedValue], value: ErasedValue) -> bool:
    return any(candidate == value for candidate in values)


@dataclass(eq=False)
class Filter(Generic[T]):
    """
    A filter over objects of type T.

    Attributes:
        raw_key: Identity of the filter, unique within a collection
        comparison_target: Accessor producing the compared field value from a T
        values: All possible values for the filter
        active_values: Currently selected values (empty means no filtering)
        dismiss_values_when_all_are_selected: Collapse policy flag
    """

    raw_key: str
    comparison_target: Accessor = field(repr=False)
    values: list[ErasedValue] = field(default_factory=list)
    active_values: list[ErasedValue] = field(default_factory=list)
    dismiss_values_when_all_are_selected: bool = field(
        default_factory=lambda: settings.dismiss_values_when_all_are_selected
    )

    @property
    def id(self) -> str:
        return self.raw_key

    @property
    def all_values_are_active(self) -> bool:
        """
        True if every value is active, or if none is.

        An empty active set accepts everything, same as a full one.
        """
        if not self.active_values:
            return True
        return all(_contains(self.active_values, value) for value in self.values)

    @property
    def all_values_are_inactive(self) -> bool:
        return not self.active_values

    @property
    def active_values_summary(self) -> str:
        """
        Comma-separated active value descriptions.

        Returns "All" when nothing is filtered out or there is nothing to choose.
        """
        if self.all_values_are_active or len(self.values) <= 1:
            return ALL_VALUES_LABEL
        return ", ".join(value.description for value in self.active_values)

    # -------------------------------------------------------------------------
    # Activation state machine
    # -------------------------------------------------------------------------

    def _defined_value(self, value: Any) -> ErasedValue:
        """
        Return the element of values equal to value.

        Raises:
            UndefinedValueError: If value is not among the possible values
        """
        erased = erase(value)
        if erased is not None:
            for candidate in self.values:
                if candidate == erased:
                    return candidate
        raise UndefinedValueError(self.raw_key, value)

    def _collapse_if_all_selected(self) -> None:
        if not self.dismiss_values_when_all_are_selected or not self.active_values:
            return
        if all(_contains(self.active_values, value) for value in self.values):
            self.active_values = []

    def toggle(self, value: Any) -> None:
        """
        Flip a value between active and inactive.

        Raises:
            UndefinedValueError: If value is not among the possible values
        """
        defined = self._defined_value(value)

        if _contains(self.active_values, defined):
            self.active_values = [v for v in self.active_values if v != defined]
        else:
            self.active_values = [*self.active_values, defined]
            self._collapse_if_all_selected()

    def activate(self, value: Any) -> None:
        """Activate a value. No-op if it is already active."""
        defined = self._defined_value(value)

        if not _contains(self.active_values, defined):
            self.active_values = [*self.active_values, defined]
            self._collapse_if_all_selected()

    def deactivate(self, value: Any) -> None:
        """Deactivate a value. No-op if it is already inactive."""
        defined = self._defined_value(value)
        self.active_values = [v for v in self.active_values if v != defined]

    def activate_all_values(self) -> None:
        """Activate every value. The collapse policy is not applied."""
        self.active_values = list(self.values)

    def deactivate_all_values(self) -> None:
        self.active_values = []

    def copy(self) -> "Filter[T]":
        """Shallow copy with independent value lists."""
        return replace(self, values=list(self.values), active_values=list(self.active_values))

    def as_all_values_activated(self) -> "Filter[T]":
        """
        Return a copy with every value active.

        Use this when the filter is held immutably.
        """
        clone = self.copy()
        clone.activate_all_values()
        return clone

    def as_all_values_deactivated(self) -> "Filter[T]":
        """Return a copy with no active values."""
        clone = self.copy()
        clone.deactivate_all_values()
        return clone

    def is_value_active(self, value: Any) -> bool:
        erased = erase(value)
        return erased is not None and _contains(self.active_values, erased)

    # -------------------------------------------------------------------------
    # Matching
    # -------------------------------------------------------------------------

    def matches(self, obj: T) -> bool:
        """
        Check if obj's compared field matches any active value.

        Always True when no value is active.
        """
        if not self.active_values:
            return True

        target = erase(self.comparison_target(obj))
        if target is None:
            return False
        return _contains(self.active_values, target)

    def as_dictionary(
        self, scope: FilterRepresentationScope = FilterRepresentationScope.ALL
    ) -> dict[str, list[Any]]:
        """Raw representation: {raw_key: [raw values]} for the given scope."""
        selected = self.values if scope == FilterRepresentationScope.ALL else self.active_values
        return {self.raw_key: [value.value for value in selected]}

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Filters are equal when raw keys match and active values match (any order)."""
        if not isinstance(other, Filter):
            return NotImplemented
        if self.raw_key != other.raw_key:
            return False
        if len(self.active_values) != len(other.active_values):
            return False
        return all(_contains(other.active_values, value) for value in self.active_values)

    def __hash__(self) -> int:
        return hash(self.raw_key)

    def __str__(self) -> str:
        return (
            f"Filter ({self.raw_key}): <Possible values: {[str(v) for v in self.values]}, "
            f"Active values: {[str(v) for v in self.active_values]}>"
        )

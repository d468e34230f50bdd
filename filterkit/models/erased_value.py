"""
Erased Value - Uniform Wrapper for Heterogeneous Comparable Values.

Filters hold values of unrelated field types (strings, numbers, enums)
side by side. ErasedValue hides the original type behind one wrapper
while keeping an equality closure captured against that type.

EQUALITY RULE (dual path, preserved exactly):
1. Both held values are strings → case-insensitive string comparison.
   The captured closures are NOT consulted on this path.
2. Otherwise → lhs closure applied to rhs value, OR rhs closure applied
   to lhs value.

WARNING: This rule is not transitive. "A" == "a" holds through the string
shortcut, while a custom type may compare equal to one casing only.
ErasedValue is unhashable, so it cannot be used in sets or as dict keys.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Kind tag for a held value."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    OTHER = "other"


def value_kind(value: Any) -> ValueKind:
    """
    Classify a raw value into its kind tag.

    bool is checked before int, so True and 1 are different kinds.
    """
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.OTHER


def is_equatable(value: Any) -> bool:
    """
    Check whether a raw value supports value equality.

    A value qualifies when it is hashable and its type defines its own
    __eq__. Enum members always qualify. None, lists, dicts and
    identity-compared objects do not.
    """
    if value is None:
        return False
    if isinstance(value, (ErasedValue, Enum)):
        return True
    try:
        hash(value)
    except TypeError:
        return False
    return type(value).__eq__ is not object.__eq__


def _make_equals(value: Any, kind: ValueKind) -> Callable[[Any], bool]:
    """Capture an equality test against the original value's kind."""
    if kind is ValueKind.OTHER:
        original_type = type(value)

        def equals_other(other: Any) -> bool:
            return isinstance(other, original_type) and bool(other == value)

        return equals_other

    def equals(other: Any) -> bool:
        return value_kind(other) is kind and bool(other == value)

    return equals


class ErasedValue:
    """
    Immutable type-erased wrapper around an equatable value.

    Attributes:
        value: The held value, in its original type
        kind: The kind tag assigned at construction
        description: String rendering of the held value
    """

    __slots__ = ("_value", "_kind", "_equals")

    def __init__(self, value: Any) -> None:
        if isinstance(value, ErasedValue):
            value = value.value
        elif not is_equatable(value):
            raise TypeError(f"{type(value).__name__} value {value!r} does not support equality")

        kind = value_kind(value)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_equals", _make_equals(value, kind))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> Any:
        return self._value

    @property
    def kind(self) -> ValueKind:
        return self._kind

    @property
    def description(self) -> str:
        return str(self._value)

    @property
    def id(self) -> str:
        """Identity used by UI lists: the string rendering."""
        return self.description

    def equals(self, other: Any) -> bool:
        """Apply the captured equality test to a raw value."""
        return self._equals(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErasedValue):
            return NotImplemented

        if isinstance(self._value, str) and isinstance(other._value, str):
            return self._value.lower() == other._value.lower()

        return self.equals(other._value) or other.equals(self._value)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"ErasedValue({self._value!r})"


def erase(value: Any) -> ErasedValue | None:
    """
    Wrap a raw value, or return None if it does not support equality.

    Already-erased values are returned unchanged.
    """
    if isinstance(value, ErasedValue):
        return value
    if not is_equatable(value):
        return None
    return ErasedValue(value)

"""
Filter keys - enumerable raw key names for one filterable type.

Declaring keys as an Enum keeps the set of filterable fields closed
and makes lookups from server-supplied strings explicit.
"""

from enum import Enum
from typing import Any, Self


class FilterKey(Enum):
    """
    Base Enum for raw filter keys.

    raw_key is the lowercased member value. auto() members use the
    symbolic member name as their value; an explicit value overrides it.

    Usage:
        class Keys(FilterKey):
            AGE = auto()            # raw_key "age"
            OWNER_NAME = "name"     # raw_key "name"
    """

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> str:
        return name

    @property
    def raw_key(self) -> str:
        return str(self.value).lower()

    @classmethod
    def from_raw_key(cls, raw_key: str) -> Self | None:
        """Exact lookup by raw key. Returns None if no member matches."""
        for member in cls:
            if member.raw_key == raw_key:
                return member
        return None

    @classmethod
    def from_case_forgiving_raw_key(cls, raw_key: str) -> Self | None:
        """
        Case-insensitive lookup by raw key, then by raw value.

        Returns None if nothing matches; unknown keys never map to a default.
        """
        lowered = raw_key.lower()
        for member in cls:
            if member.raw_key.lower() == lowered:
                return member

        for candidate in (raw_key, lowered):
            try:
                return cls(candidate)
            except ValueError:
                continue
        return None

"""
Filterable - the key resolver contract for filterable object types.

A filterable type maps raw filter keys (strings from the wire) to
accessors that extract an ErasedValue from an instance. Filters bind
their accessor once, at construction, through this contract.

Two ways to implement it:
1. Override keypath_for() directly
2. Declare FilterKeys + filter_fields and inherit the default lookup
"""

from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from filterkit.config import settings
from filterkit.models.erased_value import ErasedValue, erase
from filterkit.models.filter_key import FilterKey

# Function from an instance of a filterable type to its erased field value.
# None means the field holds no comparable value.
Accessor = Callable[[Any], ErasedValue | None]


def field_accessor(attribute: str) -> Accessor:
    """Build an accessor that reads an attribute and erases it."""

    def access(instance: Any) -> ErasedValue | None:
        return erase(getattr(instance, attribute))

    access.__name__ = f"access_{attribute}"
    return access


class Filterable:
    """
    Base class for types that can be filtered by Filter.

    Usage:
        @dataclass
        class Person(Filterable):
            name: str
            age: int

            class FilterKeys(FilterKey):
                NAME = auto()
                AGE = auto()

            filter_fields = {FilterKeys.NAME: "name", FilterKeys.AGE: "age"}
    """

    FilterKeys: ClassVar[type[FilterKey] | None] = None
    filter_fields: ClassVar[Mapping[Any, str]] = {}

    @classmethod
    def keypath_for(cls, key: str) -> Accessor | None:
        """
        Resolve a raw filter key to an accessor.

        Matching is case-insensitive. Returns None for unrecognized keys.
        """
        if cls.FilterKeys is None:
            return None

        filter_key = cls.FilterKeys.from_case_forgiving_raw_key(key.lower())
        if filter_key is None:
            return None

        attribute = cls.filter_fields.get(filter_key)
        if attribute is None:
            return None

        return field_accessor(attribute)

    @classmethod
    def dismiss_active_values_when_all_are_selected(cls, key: str) -> bool:  # noqa: ARG003
        """Collapse policy for a key. Defaults to the configured policy."""
        return settings.dismiss_values_when_all_are_selected

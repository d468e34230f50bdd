"""
Tests for the Filter activation state machine and match predicate.

INVARIANTS:
- active_values is always a subset of values
- Undefined values raise UndefinedValueError and change nothing
- Selecting every value collapses to no-filter under the dismiss policy
- An empty active set accepts every object
"""

import pytest

from filterkit.filtering.raw import as_erased_values
from filterkit.models.erased_value import ErasedValue
from filterkit.models.failure import FilterErrorKind, UndefinedValueError
from filterkit.models.filter import Filter, FilterRepresentationScope
from filterkit.models.filterable import field_accessor
from tests.samples import Person


def make_filter(values: list, dismiss: bool = True, raw_key: str = "age") -> Filter[Person]:
    return Filter(
        raw_key=raw_key,
        comparison_target=field_accessor(raw_key),
        values=as_erased_values(values),
        dismiss_values_when_all_are_selected=dismiss,
    )


@pytest.fixture
def age_filter() -> Filter[Person]:
    return make_filter([10, 11, 12])


@pytest.fixture
def gender_filter() -> Filter[Person]:
    return make_filter(["male", "female"], raw_key="gender")


class TestInitialState:
    def test_starts_with_no_active_values(self, age_filter: Filter[Person]) -> None:
        assert age_filter.active_values == []
        assert age_filter.all_values_are_inactive

    def test_empty_active_set_counts_as_all_active(self, age_filter: Filter[Person]) -> None:
        """Empty and full active sets both mean 'accept everything'."""
        assert age_filter.all_values_are_active

    def test_id_is_raw_key(self, age_filter: Filter[Person]) -> None:
        assert age_filter.id == "age"

    def test_dismiss_policy_defaults_to_true(self) -> None:
        filter_ = Filter(raw_key="age", comparison_target=field_accessor("age"))
        assert filter_.dismiss_values_when_all_are_selected is True


class TestToggle:
    """Tests for toggle()."""

    def test_toggle_activates(self, age_filter: Filter[Person]) -> None:
        age_filter.toggle(11)

        assert age_filter.is_value_active(11)
        assert not age_filter.is_value_active(10)
        assert not age_filter.all_values_are_active

    def test_toggle_is_self_inverse(self, age_filter: Filter[Person]) -> None:
        for value in (10, 11, 12):
            before = age_filter.is_value_active(value)
            age_filter.toggle(value)
            age_filter.toggle(value)
            assert age_filter.is_value_active(value) == before

    def test_toggle_accepts_erased_values(self, age_filter: Filter[Person]) -> None:
        age_filter.toggle(ErasedValue(12))
        assert age_filter.is_value_active(12)

    def test_toggle_stores_the_defined_value(self, gender_filter: Filter[Person]) -> None:
        """Activating 'MALE' stores the 'male' element from values."""
        gender_filter.toggle("MALE")

        assert [v.value for v in gender_filter.active_values] == ["male"]

    def test_toggle_last_value_collapses(self, age_filter: Filter[Person]) -> None:
        age_filter.toggle(10)
        age_filter.toggle(11)
        age_filter.toggle(12)

        assert age_filter.active_values == []
        assert age_filter.all_values_are_inactive

    def test_toggle_last_value_without_dismiss_keeps_all(self) -> None:
        filter_ = make_filter([10, 11, 12], dismiss=False)

        for value in (10, 11, 12):
            filter_.toggle(value)

        assert len(filter_.active_values) == 3
        assert filter_.all_values_are_active
        assert not filter_.all_values_are_inactive

    def test_toggle_undefined_value_raises(self, age_filter: Filter[Person]) -> None:
        age_filter.toggle(10)

        with pytest.raises(UndefinedValueError) as exc_info:
            age_filter.toggle(99)

        assert exc_info.value.kind == FilterErrorKind.UNDEFINED_VALUE
        assert exc_info.value.raw_key == "age"
        assert [v.value for v in age_filter.active_values] == [10]

    def test_toggle_value_of_other_kind_raises(self, age_filter: Filter[Person]) -> None:
        """'11' (string) is not the integer 11."""
        with pytest.raises(UndefinedValueError):
            age_filter.toggle("11")
        assert age_filter.active_values == []

    def test_toggle_non_equatable_value_raises(self, age_filter: Filter[Person]) -> None:
        with pytest.raises(UndefinedValueError):
            age_filter.toggle([11])


class TestActivateDeactivate:
    """Tests for idempotent activate()/deactivate()."""

    def test_activate_is_idempotent(self, age_filter: Filter[Person]) -> None:
        age_filter.activate(11)
        age_filter.activate(11)

        assert len(age_filter.active_values) == 1

    def test_deactivate_is_idempotent(self, age_filter: Filter[Person]) -> None:
        age_filter.activate(11)
        age_filter.deactivate(11)
        age_filter.deactivate(11)

        assert age_filter.active_values == []

    def test_activate_last_value_collapses(self, gender_filter: Filter[Person]) -> None:
        gender_filter.activate("male")
        gender_filter.activate("female")

        assert gender_filter.active_values == []

    def test_activate_undefined_value_raises(self, age_filter: Filter[Person]) -> None:
        with pytest.raises(UndefinedValueError):
            age_filter.activate(42)

    def test_deactivate_undefined_value_raises(self, age_filter: Filter[Person]) -> None:
        age_filter.activate(10)

        with pytest.raises(UndefinedValueError):
            age_filter.deactivate(42)

        assert age_filter.is_value_active(10)


class TestBulkActivation:
    """Tests for activating and deactivating every value."""

    def test_activate_all_values_bypasses_collapse(self, age_filter: Filter[Person]) -> None:
        age_filter.activate_all_values()

        assert len(age_filter.active_values) == 3
        assert age_filter.all_values_are_active

    def test_toggle_after_activate_all_deactivates_value(self, age_filter: Filter[Person]) -> None:
        age_filter.activate_all_values()
        age_filter.toggle(11)

        assert not age_filter.is_value_active(11)
        assert len(age_filter.active_values) == 2

    def test_activate_after_activate_all_collapses(self, age_filter: Filter[Person]) -> None:
        """Any mutation on a fully active set reapplies the dismiss policy."""
        age_filter.activate_all_values()
        age_filter.toggle(11)
        age_filter.toggle(11)

        assert age_filter.active_values == []

    def test_deactivate_all_values(self, age_filter: Filter[Person]) -> None:
        age_filter.activate(10)
        age_filter.deactivate_all_values()

        assert age_filter.active_values == []

    def test_as_all_values_activated_returns_copy(self, age_filter: Filter[Person]) -> None:
        activated = age_filter.as_all_values_activated()

        assert len(activated.active_values) == 3
        assert age_filter.active_values == []

    def test_as_all_values_deactivated_returns_copy(self, age_filter: Filter[Person]) -> None:
        age_filter.activate(10)

        deactivated = age_filter.as_all_values_deactivated()

        assert deactivated.active_values == []
        assert age_filter.is_value_active(10)

    def test_copies_do_not_share_lists(self, age_filter: Filter[Person]) -> None:
        clone = age_filter.copy()
        clone.activate(10)

        assert age_filter.active_values == []
        assert clone.comparison_target is age_filter.comparison_target


class TestMatches:
    """Tests for the match predicate."""

    def test_no_active_values_matches_everything(self, age_filter: Filter[Person]) -> None:
        assert age_filter.matches(Person(name="Alex", age=99, gender="male"))

    def test_matches_active_value(self, age_filter: Filter[Person]) -> None:
        age_filter.toggle(11)

        assert age_filter.matches(Person(name="Or", age=11, gender="female"))
        assert not age_filter.matches(Person(name="Tal", age=12, gender="male"))

    def test_matches_any_active_value(self, age_filter: Filter[Person]) -> None:
        age_filter.toggle(10)
        age_filter.toggle(12)

        assert age_filter.matches(Person(name="Noam", age=10, gender="male"))
        assert age_filter.matches(Person(name="Tal", age=12, gender="male"))
        assert not age_filter.matches(Person(name="Or", age=11, gender="female"))

    def test_string_matching_is_case_insensitive(self, gender_filter: Filter[Person]) -> None:
        gender_filter.toggle("female")

        assert gender_filter.matches(Person(name="Or", age=11, gender="Female"))

    def test_accessor_returning_raw_value(self) -> None:
        filter_: Filter[Person] = Filter(
            raw_key="age",
            comparison_target=lambda person: person.age,  # type: ignore[arg-type, return-value]
            values=as_erased_values([10, 11]),
        )
        filter_.toggle(10)

        assert filter_.matches(Person(name="Noam", age=10, gender="male"))

    def test_accessor_returning_none_never_matches_active_filter(self) -> None:
        filter_: Filter[Person] = Filter(
            raw_key="age",
            comparison_target=lambda person: None,
            values=as_erased_values([10, 11]),
        )
        filter_.toggle(10)

        assert not filter_.matches(Person(name="Noam", age=10, gender="male"))


class TestIdentity:
    """Tests for equality, hashing and representations."""

    def test_equal_when_key_and_active_values_match(self) -> None:
        a = make_filter([10, 11, 12])
        b = make_filter([10, 11, 12, 13], dismiss=False)
        a.toggle(11)
        b.toggle(11)

        assert a == b

    def test_equality_ignores_activation_order(self) -> None:
        a = make_filter([10, 11, 12])
        b = make_filter([10, 11, 12])
        a.toggle(10)
        a.toggle(11)
        b.toggle(11)
        b.toggle(10)

        assert a == b

    def test_not_equal_with_different_active_values(self) -> None:
        a = make_filter([10, 11, 12])
        b = make_filter([10, 11, 12])
        a.toggle(10)

        assert a != b

    def test_not_equal_with_different_keys(self) -> None:
        assert make_filter([1], raw_key="age") != make_filter([1], raw_key="name")

    def test_hash_uses_raw_key(self) -> None:
        a = make_filter([10, 11])
        b = make_filter([10, 11, 12])

        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_str(self, age_filter: Filter[Person]) -> None:
        age_filter.toggle(11)

        assert str(age_filter) == (
            "Filter (age): <Possible values: ['10', '11', '12'], Active values: ['11']>"
        )

    def test_active_values_summary(self, age_filter: Filter[Person]) -> None:
        assert age_filter.active_values_summary == "All"

        age_filter.toggle(10)
        age_filter.toggle(12)

        assert age_filter.active_values_summary == "10, 12"

    def test_active_values_summary_single_value(self) -> None:
        filter_ = make_filter([10], dismiss=False)
        filter_.toggle(10)

        assert filter_.active_values_summary == "All"

    def test_as_dictionary_scopes(self, age_filter: Filter[Person]) -> None:
        age_filter.toggle(11)

        assert age_filter.as_dictionary() == {"age": [10, 11, 12]}
        assert age_filter.as_dictionary(FilterRepresentationScope.ACTIVE) == {"age": [11]}

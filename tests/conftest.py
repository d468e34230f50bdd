from typing import Any

import pytest

from filterkit.filtering.apply import reset_apply_metrics
from tests.samples import Dog, Person


@pytest.fixture(autouse=True)
def clear_apply_metrics():
    """Clear the apply metrics history between tests."""
    reset_apply_metrics()
    yield
    reset_apply_metrics()


@pytest.fixture
def raw_filters() -> dict[str, list[Any]]:
    """Raw filter map as an API would return it."""
    return {
        "age": [10, 11, 12, 13, 14, 15],
        "name": ["or", "maayan", "noam"],
        "dogName": ["wooferz", "Bonnie"],
        "gender": ["female", "male"],
    }


@pytest.fixture
def people() -> list[Person]:
    return [
        Person(name="Noam", age=10, gender="male"),
        Person(name="Or", age=11, gender="female"),
        Person(name="Maayan", age=11, gender="male"),
        Person(name="Tal", age=12, gender="female"),
        Person(name="Alex", age=30, gender="male"),
        Person(name="Or", age=14, gender="male"),
    ]


@pytest.fixture
def dogs() -> list[Dog]:
    return [
        Dog(name="Lucky", owner_name="Noam", age=3),
        Dog(name="Bonnie", owner_name="Or", age=11),
        Dog(name="Wooferz", owner_name="Tal", age=12),
        Dog(name="Bonnie", owner_name="Maayan", age=10),
    ]

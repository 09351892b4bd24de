"""Shared test fixtures."""

from dataclasses import dataclass
from typing import List, Optional

import pytest


class Subject:
    """Object whose attributes are only set when a test assigns them."""

    property: Optional[str]
    inner: Optional["Inner"]


class Inner:
    """Nested object reached through Subject.inner."""

    property: Optional[str]


@dataclass
class Address:
    street: str
    city: Optional[str] = None


@dataclass
class Person:
    name: str
    tags: List[str]
    address: Optional[Address] = None


@pytest.fixture
def subject() -> Subject:
    """Fixture providing an object with no attributes assigned."""
    return Subject()


@pytest.fixture
def person() -> Person:
    """Fixture providing a fully populated person."""
    return Person(name="Ada", tags=["math"], address=Address(street="1 Analytical Way", city="London"))

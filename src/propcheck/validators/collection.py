"""
Collection Validators for Propcheck

Validators for sized values such as lists, tuples, sets, dicts and strings.
Any value supporting len() is accepted; values without a length, including
MISSING and None, are invalid.
"""

from typing import Any, Optional

from ..core.exceptions import ConfigurationError
from ..validation.base import PropertyValidator


def _size(value: Any) -> Optional[int]:
    """Return len(value), or None if the value has no length."""
    if value is None or not hasattr(value, "__len__"):
        return None
    try:
        return len(value)
    except TypeError:
        return None


def _check_count(name: str, count: Any) -> int:
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ConfigurationError(f"{name} must be a non-negative integer, got {count!r}")
    return count


class IsNotEmptyValidator(PropertyValidator):
    """Valid if the value has at least one element."""

    def is_valid(self, value: Any) -> bool:
        size = _size(value)
        return size is not None and size > 0


class IsEmptyValidator(PropertyValidator):
    """Valid if the value has no elements."""

    def is_valid(self, value: Any) -> bool:
        return _size(value) == 0


class HasNumberOfElementsValidator(PropertyValidator):
    """
    Valid if the value has exactly the given number of elements.

    Attributes:
        number_of_elements (int): Required element count
    """

    def __init__(self, number_of_elements: int):
        self.number_of_elements = _check_count("number_of_elements", number_of_elements)

    def is_valid(self, value: Any) -> bool:
        return _size(value) == self.number_of_elements

    def __repr__(self) -> str:
        return f"HasNumberOfElementsValidator({self.number_of_elements})"


class HasMinNumberOfElementsValidator(PropertyValidator):
    """
    Valid if the value has at least the given number of elements.

    Attributes:
        min_element_count (int): Minimum element count, inclusive
    """

    def __init__(self, min_element_count: int):
        self.min_element_count = _check_count("min_element_count", min_element_count)

    def is_valid(self, value: Any) -> bool:
        size = _size(value)
        return size is not None and size >= self.min_element_count

    def __repr__(self) -> str:
        return f"HasMinNumberOfElementsValidator({self.min_element_count})"


class HasMaxNumberOfElementsValidator(PropertyValidator):
    """
    Valid if the value has at most the given number of elements.

    Attributes:
        max_element_count (int): Maximum element count, inclusive
    """

    def __init__(self, max_element_count: int):
        self.max_element_count = _check_count("max_element_count", max_element_count)

    def is_valid(self, value: Any) -> bool:
        size = _size(value)
        return size is not None and size <= self.max_element_count

    def __repr__(self) -> str:
        return f"HasMaxNumberOfElementsValidator({self.max_element_count})"

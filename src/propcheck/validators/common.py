"""
Common Validators for Propcheck

Validators that apply to values of any type.
"""

from typing import Any, Callable, Iterable

from ..core.exceptions import ConfigurationError
from ..validation.base import MISSING, PropertyValidator


class IsDefinedValidator(PropertyValidator):
    """Valid unless the value is MISSING."""

    def is_valid(self, value: Any) -> bool:
        return value is not MISSING


class IsNotNullValidator(PropertyValidator):
    """Valid unless the value is MISSING or None."""

    def is_valid(self, value: Any) -> bool:
        return value is not MISSING and value is not None


class IsEqualValidator(PropertyValidator):
    """
    Valid if the value equals the expected value.

    Attributes:
        expected: Value to compare against
    """

    def __init__(self, expected: Any):
        self.expected = expected

    def is_valid(self, value: Any) -> bool:
        return value is not MISSING and value == self.expected

    def __repr__(self) -> str:
        return f"IsEqualValidator({self.expected!r})"


class IsInValidator(PropertyValidator):
    """
    Valid if the value is one of the allowed values.

    Attributes:
        allowed (tuple): Allowed values
    """

    def __init__(self, allowed: Iterable[Any]):
        self.allowed = tuple(allowed)
        if not self.allowed:
            raise ConfigurationError("IsInValidator requires at least one allowed value")

    def is_valid(self, value: Any) -> bool:
        return value is not MISSING and value in self.allowed

    def __repr__(self) -> str:
        return f"IsInValidator({list(self.allowed)!r})"


class PredicateValidator(PropertyValidator):
    """
    Validator delegating to a callable.

    The callable receives the value and returns a truthy result when it is
    valid. It must not raise; a raising predicate is a programming error and
    propagates.

    Attributes:
        predicate: Function implementing the check
    """

    def __init__(self, predicate: Callable[[Any], bool]):
        if not callable(predicate):
            raise ConfigurationError(f"predicate must be callable, got {type(predicate).__name__}")
        self.predicate = predicate

    def is_valid(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def __repr__(self) -> str:
        return f"PredicateValidator({getattr(self.predicate, '__name__', self.predicate)!s})"

"""
Type Validators for Propcheck

Validators checking the runtime type of a value.
"""

from datetime import date
from numbers import Number
from typing import Any

from ..validation.base import PropertyValidator


class IsNumberValidator(PropertyValidator):
    """Valid for numbers. Booleans are not considered numbers."""

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, Number) and not isinstance(value, bool)


class IsStringValidator(PropertyValidator):
    """Valid for str instances."""

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str)


class IsBooleanValidator(PropertyValidator):
    """Valid for bool instances."""

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, bool)


class IsDateValidator(PropertyValidator):
    """Valid for date and datetime instances."""

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, date)

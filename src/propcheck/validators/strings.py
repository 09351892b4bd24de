"""
String Validators for Propcheck

Validators for string values. Non-string input, MISSING and None are always
invalid.
"""

import re
from typing import Any, Union

from ..core.exceptions import ConfigurationError
from ..validation.base import PropertyValidator

NUMERIC_PATTERN = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


class IsNumericStringValidator(PropertyValidator):
    """
    Valid if the string is a decimal number.

    Accepts an optional sign and an optional fractional part, e.g. "42",
    "-1.5" or ".5". The empty string is invalid.
    """

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and bool(NUMERIC_PATTERN.match(value))


class IsBooleanStringValidator(PropertyValidator):
    """Valid if the string is one of "true", "false", "1" or "0"."""

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and value in BOOLEAN_STRINGS


class ContainsValidator(PropertyValidator):
    """
    Valid if the string contains the seed.

    Attributes:
        seed (str): Substring that must be present
    """

    def __init__(self, seed: str):
        if not isinstance(seed, str):
            raise ConfigurationError(f"seed must be a string, got {type(seed).__name__}")
        self.seed = seed

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and self.seed in value

    def __repr__(self) -> str:
        return f"ContainsValidator({self.seed!r})"


class MatchesValidator(PropertyValidator):
    """
    Valid if the regular expression matches anywhere in the string.

    Attributes:
        pattern: Compiled regular expression pattern
    """

    def __init__(self, pattern: Union[str, re.Pattern], flags: int = 0):
        if isinstance(pattern, re.Pattern):
            if not isinstance(pattern.pattern, str):
                raise ConfigurationError(f"compiled pattern must be a text pattern, got {pattern!r}")
            if flags:
                raise ConfigurationError("flags cannot be combined with a compiled pattern")
            self.pattern = pattern
            return
        if not isinstance(pattern, str):
            raise ConfigurationError(f"pattern must be a string or compiled pattern, got {pattern!r}")
        try:
            self.pattern = re.compile(pattern, flags)
        except re.error as e:
            raise ConfigurationError(f"invalid regular expression {pattern!r}: {e}") from e

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and self.pattern.search(value) is not None

    def __repr__(self) -> str:
        return f"MatchesValidator({self.pattern.pattern!r})"


class IsLowercaseValidator(PropertyValidator):
    """Valid if the string equals its lowercase form."""

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and value == value.lower()


class IsUppercaseValidator(PropertyValidator):
    """Valid if the string equals its uppercase form."""

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and value == value.upper()

"""
Base Validation Components for Propcheck

This module provides the foundational components used throughout the validation
system. It includes the PropertyValidator contract implemented by every atomic
check, the ValidationFailure record describing one violation, and the
ValidationResult accumulator that collects failures for one validation pass.

It also defines the MISSING sentinel. Python has no distinct "undefined" value,
so MISSING stands for a property that is absent, as opposed to one that is
explicitly set to None.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from ..core.exceptions import ValidationError


class _Missing:
    """Type of the MISSING sentinel."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: Any) -> "_Missing":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def is_missing(value: Any) -> bool:
    """Return True if value is the MISSING sentinel."""
    return value is MISSING


class PropertyValidator:
    """
    Base class for all property validators.

    A property validator is a pure predicate over a single extracted value.
    Subclasses override is_valid() to implement their check. Implementations
    must not raise for absent (MISSING) or None input; those are ordinary
    cases that normally yield False.
    """

    def is_valid(self, value: Any) -> bool:
        """
        Check a value against the validator.

        Args:
            value: Value to check

        Returns:
            bool: True if the value satisfies the check, False otherwise

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Property validators must implement is_valid()")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@dataclass(frozen=True)
class ValidationFailure:
    """
    Record of one failed check.

    Attributes:
        code (Optional[str]): Machine readable failure code, if configured
        message (Optional[str]): Human readable failure message, if configured
        target (Optional[Any]): Reference to the rule or property that failed
    """

    code: Optional[str] = None
    message: Optional[str] = None
    target: Optional[Any] = None


class ValidationResult:
    """
    Accumulator for the failures of one validation pass.

    A result starts empty and is filled by the validation engine. The failure
    sequence keeps insertion order and allows duplicates. All queries return
    copies, so callers cannot alter the accumulated state.
    """

    def __init__(self):
        self._failures: List[ValidationFailure] = []

    def is_valid(self) -> bool:
        """Return True if no failures have been recorded."""
        return len(self._failures) == 0

    def is_invalid(self) -> bool:
        """Return True if at least one failure has been recorded."""
        return not self.is_valid()

    def add_failures(self, failures: Optional[Iterable[ValidationFailure]]) -> None:
        """
        Append failures to the result.

        Args:
            failures: Failures to append in order. None is ignored.
        """
        if failures is None:
            return
        self._failures.extend(failures)

    def get_failures(self) -> List[ValidationFailure]:
        """Return a copy of the recorded failures in insertion order."""
        return list(self._failures)

    def get_failure_messages(self) -> List[str]:
        """
        Return the messages of all failures that carry one.

        Failures without a message are skipped rather than rendered as
        empty strings.
        """
        return [failure.message for failure in self._failures if failure.message]

    def get_failure_codes(self) -> List[str]:
        """Return the codes of all failures that carry one."""
        return [failure.code for failure in self._failures if failure.code]

    def raise_for_failures(self) -> None:
        """
        Raise ValidationError if the result is invalid.

        Raises:
            ValidationError: Carrying a snapshot of the recorded failures
        """
        if self.is_invalid():
            messages = self.get_failure_messages()
            summary = "; ".join(messages) if messages else f"{len(self)} check(s) failed"
            raise ValidationError(summary, self.get_failures())

    def __bool__(self) -> bool:
        return self.is_valid()

    def __len__(self) -> int:
        return len(self._failures)

    def __repr__(self) -> str:
        return f"ValidationResult(failures={self._failures!r})"

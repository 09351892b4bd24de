"""
Date Validators for Propcheck

Validators comparing date and datetime values against a reference. A value is
only comparable with a reference of the same kind: a datetime with a datetime,
a date with a date. Incomparable values, including naive/aware datetime mixes,
are invalid.
"""

from datetime import date, datetime
from typing import Any, Union

from ..core.exceptions import ConfigurationError
from ..validation.base import PropertyValidator

DateLike = Union[date, datetime]


def _same_kind(value: Any, reference: DateLike) -> bool:
    if isinstance(reference, datetime):
        return isinstance(value, datetime)
    return isinstance(value, date) and not isinstance(value, datetime)


class _DateComparisonValidator(PropertyValidator):
    def __init__(self, reference: DateLike):
        if not isinstance(reference, date):
            raise ConfigurationError(
                f"reference must be a date or datetime, got {type(reference).__name__}"
            )
        self.reference = reference

    def is_valid(self, value: Any) -> bool:
        if not _same_kind(value, self.reference):
            return False
        try:
            return self._compare(value)
        except TypeError:
            # naive and aware datetimes
            return False

    def _compare(self, value: DateLike) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reference.isoformat()})"


class IsBeforeValidator(_DateComparisonValidator):
    """Valid if the value lies strictly before the reference date."""

    def _compare(self, value: DateLike) -> bool:
        return value < self.reference


class IsAfterValidator(_DateComparisonValidator):
    """Valid if the value lies strictly after the reference date."""

    def _compare(self, value: DateLike) -> bool:
        return value > self.reference

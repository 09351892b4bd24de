"""
Validation Conditions for Propcheck

A condition decides whether the validators of a rule should run at all for a
given owning object. Both built-in conditions wrap an accessor that reads the
property from the owner:

- WhenDefinedCondition runs validation unless the property is absent
- WhenNotNullCondition runs validation unless the property is absent or None

If the accessor itself raises, for example because an intermediate object on a
property path is absent, the condition evaluates to False and the rule is
skipped. The fault is logged at DEBUG level and never propagated.

The property_path() helper builds accessors that walk dotted paths and return
MISSING instead of raising when an intermediate value is absent.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, List

from ..core.exceptions import ConfigurationError
from .base import MISSING

logger = logging.getLogger(__name__)

Accessor = Callable[[Any], Any]


def _lookup(value: Any, part: str) -> Any:
    """Read one path segment from a mapping, sequence or object."""
    if isinstance(value, Mapping):
        return value.get(part, MISSING)
    if part.isdigit() and isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        index = int(part)
        return value[index] if index < len(value) else MISSING
    return getattr(value, part, MISSING)


def property_path(path: str) -> Accessor:
    """
    Build an accessor for a dotted property path.

    Each segment is looked up as a mapping key, a sequence index (for numeric
    segments) or an attribute. When an intermediate value is absent or None
    the accessor returns MISSING instead of raising.

    Args:
        path: Dotted path such as "address.city" or "items.0.name"

    Returns:
        Accessor: Function reading the path from an owning object

    Raises:
        ConfigurationError: If the path is empty or contains an empty segment

    Example:
        >>> get_city = property_path("address.city")
        >>> get_city({"address": {"city": "Oslo"}})
        'Oslo'
        >>> get_city({"address": None})
        MISSING
    """
    if not isinstance(path, str) or not path:
        raise ConfigurationError("property path must be a non-empty string")
    parts: List[str] = path.split(".")
    if any(not part for part in parts):
        raise ConfigurationError(f"property path contains an empty segment: {path!r}")

    def accessor(owner: Any) -> Any:
        value = owner
        for part in parts:
            if value is None or value is MISSING:
                return MISSING
            value = _lookup(value, part)
        return value

    accessor.__name__ = f"property_path({path!r})"
    accessor.path = path  # type: ignore[attr-defined]
    return accessor


def read_property(get: Accessor, owner: Any) -> Any:
    """Read a property through an accessor, mapping any accessor fault to MISSING."""
    try:
        return get(owner)
    except Exception as e:
        logger.debug(f"Accessor {getattr(get, '__name__', get)!s} failed, skipping: {e!r}")
        return MISSING


class ValidationCondition:
    """
    Base class for validation conditions.

    Subclasses override accepts() to decide from the property value alone,
    or should_do_validation() to decide from the whole owning object,
    whether a rule's validators should run.

    Attributes:
        get: Accessor reading the guarded property from the owning object
    """

    def __init__(self, get: Accessor):
        """
        Initialize a condition.

        Args:
            get: Single-argument callable reading the property from the owner

        Raises:
            ConfigurationError: If get is not callable
        """
        if not callable(get):
            raise ConfigurationError(f"condition accessor must be callable, got {type(get).__name__}")
        self.get = get

    def should_do_validation(self, owner: Any) -> bool:
        """
        Decide whether validation should run for the owner.

        Args:
            owner: Object the property is read from

        Returns:
            bool: True if the rule's validators should run
        """
        return self.accepts(self._read(owner))

    def accepts(self, value: Any) -> bool:
        """
        Decide from an already read property value whether validation should run.

        Args:
            value: Property value, MISSING when absent or unreadable

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation conditions must implement accepts() or should_do_validation()")

    def decides_on_value(self) -> bool:
        """True if the decision depends only on the value read by accepts()."""
        overrides_owner_check = type(self).should_do_validation is not ValidationCondition.should_do_validation
        overrides_value_check = type(self).accepts is not ValidationCondition.accepts
        return overrides_value_check and not overrides_owner_check

    def _read(self, owner: Any) -> Any:
        """Read the property, mapping any accessor fault to MISSING."""
        return read_property(self.get, owner)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self.get, '__name__', self.get)!s})"


class WhenDefinedCondition(ValidationCondition):
    """
    Run validation unless the property is absent.

    None and empty values count as defined. An accessor that raises, or a
    property that was never assigned, counts as absent.
    """

    def accepts(self, value: Any) -> bool:
        return value is not MISSING


class WhenNotNullCondition(ValidationCondition):
    """
    Run validation unless the property is absent or None.

    Empty values such as "" still run validation.
    """

    def accepts(self, value: Any) -> bool:
        return value is not MISSING and value is not None

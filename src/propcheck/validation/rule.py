"""
Property Validation Rules for Propcheck

A PropertyValidationRule binds together everything needed to check one
property of an owning object:

- an accessor reading the property value from the owner
- a condition deciding whether the property should be validated at all
- one or more validators, each with the failure code and message to report

Rules are immutable once constructed and can be shared between passes.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from ..core.exceptions import ConfigurationError
from .base import PropertyValidator, ValidationFailure
from .conditions import Accessor, ValidationCondition, WhenDefinedCondition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundValidator:
    """
    A validator together with the failure data it reports.

    Attributes:
        validator (PropertyValidator): The check to run
        code (Optional[str]): Failure code reported when the check fails
        message (Optional[str]): Failure message reported when the check fails
    """

    validator: PropertyValidator
    code: Optional[str] = None
    message: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.validator, PropertyValidator):
            raise ConfigurationError(
                f"validator must be a PropertyValidator, got {type(self.validator).__name__}"
            )


class PropertyValidationRule:
    """
    Binding of an accessor, a condition and validators for one property.

    Attributes:
        get (Accessor): Reads the property value from the owning object
        condition (ValidationCondition): Gate evaluated against the owner
        validators (Tuple[BoundValidator, ...]): Checks run when the gate opens
        property_name (Optional[str]): Name used as failure target, if known
    """

    def __init__(
        self,
        get: Accessor,
        validators: Iterable[BoundValidator],
        condition: Optional[ValidationCondition] = None,
        property_name: Optional[str] = None,
    ):
        """
        Initialize a property validation rule.

        Args:
            get: Single-argument callable reading the property from the owner
            validators: Bound validators; plain PropertyValidator instances are
                wrapped without code or message
            condition: Condition guarding the rule, defaults to
                WhenDefinedCondition over the same accessor
            property_name: Optional name reported as failure target

        Raises:
            ConfigurationError: If the accessor is not callable, no validators
                are given, or a validator has the wrong type
        """
        if not callable(get):
            raise ConfigurationError(f"rule accessor must be callable, got {type(get).__name__}")
        if condition is not None and not isinstance(condition, ValidationCondition):
            raise ConfigurationError(
                f"condition must be a ValidationCondition, got {type(condition).__name__}"
            )

        bound = tuple(
            v if isinstance(v, BoundValidator) else BoundValidator(v) for v in validators
        )
        if not bound:
            raise ConfigurationError("a property validation rule needs at least one validator")

        self.get = get
        self.condition = condition or WhenDefinedCondition(get)
        self.validators: Tuple[BoundValidator, ...] = bound
        self.property_name = property_name or getattr(get, "path", None)

    @property
    def target(self) -> Any:
        """Reference reported on failures: the property name, else the rule."""
        return self.property_name if self.property_name is not None else self

    def validate(self, owner: Any) -> List[ValidationFailure]:
        """
        Evaluate the rule against one owning object.

        The property value is read once. If the accessor raises, the rule
        contributes no failures. The condition is checked next, on the value
        already read when it guards the same accessor, and if it is False no
        validator runs. Otherwise every bound validator is applied to the value
        and each one returning False yields one ValidationFailure.

        Args:
            owner: Object to read the property from

        Returns:
            List[ValidationFailure]: Failures in validator declaration order
        """
        try:
            value = self.get(owner)
        except Exception as e:
            logger.debug(f"Accessor failed, skipping rule for {self.target!s}: {e!r}")
            return []

        if self.condition.get is self.get and self.condition.decides_on_value():
            should_validate = self.condition.accepts(value)
        else:
            should_validate = self.condition.should_do_validation(owner)
        if not should_validate:
            logger.debug(f"Condition not met, skipping rule for {self.target!s}")
            return []

        failures = []
        for bound in self.validators:
            if not bound.validator.is_valid(value):
                failures.append(
                    ValidationFailure(code=bound.code, message=bound.message, target=self.target)
                )
        return failures

    def __repr__(self) -> str:
        return (
            f"PropertyValidationRule(property={getattr(self, 'property_name', None)!r}, "
            f"condition={getattr(self, 'condition', None)!r}, "
            f"validators={len(getattr(self, 'validators', ()))})"
        )

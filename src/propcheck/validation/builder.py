"""
Fluent Rule Builder for Propcheck

This module provides a chainable way to declare property validation rules.
Validator classes subclass AbstractValidator and declare their rules in
setup():

    class PersonValidator(AbstractValidator):
        def setup(self):
            self.validate_if_defined(lambda p: p.name).is_not_empty().with_code("E_NAME")
            self.validate_if_not_null("address.city").is_string().with_message("City must be text")

    result = PersonValidator().validate(person)

Each validate_if_* call starts one rule. Every check method adds one validator
to that rule, and with_code()/with_message() configure the failure data of the
most recently added validator.
"""

import re
from datetime import date
from typing import Any, Callable, Iterable, List, Optional, Tuple, Type, Union

from ..core.exceptions import ConfigurationError
from ..validators import (
    ContainsValidator,
    HasMaxNumberOfElementsValidator,
    HasMinNumberOfElementsValidator,
    HasNumberOfElementsValidator,
    IsAfterValidator,
    IsBeforeValidator,
    IsBooleanStringValidator,
    IsBooleanValidator,
    IsDateValidator,
    IsDefinedValidator,
    IsEmptyValidator,
    IsEqualValidator,
    IsInValidator,
    IsLowercaseValidator,
    IsNotEmptyValidator,
    IsNotNullValidator,
    IsNumberValidator,
    IsNumericStringValidator,
    IsStringValidator,
    IsUppercaseValidator,
    MatchesValidator,
    PredicateValidator,
)
from .base import PropertyValidator, ValidationResult
from .conditions import Accessor, ValidationCondition, WhenDefinedCondition, WhenNotNullCondition, property_path
from .engine import ValidationEngine
from .rule import BoundValidator, PropertyValidationRule

AccessorLike = Union[str, Accessor]
ConditionLike = Union[ValidationCondition, Type[ValidationCondition]]


def resolve_accessor(accessor: AccessorLike) -> Accessor:
    """Turn a dotted path into an accessor; pass callables through."""
    if isinstance(accessor, str):
        return property_path(accessor)
    if not callable(accessor):
        raise ConfigurationError(
            f"accessor must be a callable or a property path, got {type(accessor).__name__}"
        )
    return accessor


class ValidatorBuilder:
    """
    Chainable builder for one property validation rule.

    Attributes:
        get: Accessor reading the property from the owning object
        condition: Condition guarding the rule
        property_name: Name reported as failure target
    """

    def __init__(
        self,
        get: Accessor,
        condition: ValidationCondition,
        property_name: Optional[str] = None,
    ):
        self.get = get
        self.condition = condition
        self.property_name = property_name
        self._validators: List[PropertyValidator] = []
        self._codes: List[Optional[str]] = []
        self._messages: List[Optional[str]] = []

    def with_validator(self, validator: PropertyValidator) -> "ValidatorBuilder":
        """Add an arbitrary validator to the rule."""
        if not isinstance(validator, PropertyValidator):
            raise ConfigurationError(
                f"validator must be a PropertyValidator, got {type(validator).__name__}"
            )
        self._validators.append(validator)
        self._codes.append(None)
        self._messages.append(None)
        return self

    def _require_validator(self, option: str) -> int:
        if not self._validators:
            raise ConfigurationError(f"{option}() must follow a validator")
        return len(self._validators) - 1

    def with_message(self, message: str) -> "ValidatorBuilder":
        """Set the failure message of the most recently added validator."""
        self._messages[self._require_validator("with_message")] = message
        return self

    def with_code(self, code: str) -> "ValidatorBuilder":
        """Set the failure code of the most recently added validator."""
        self._codes[self._require_validator("with_code")] = code
        return self

    def with_property_name(self, name: str) -> "ValidatorBuilder":
        """Set the name reported as failure target for the whole rule."""
        self.property_name = name
        return self

    # Common

    def is_defined(self) -> "ValidatorBuilder":
        return self.with_validator(IsDefinedValidator())

    def is_not_null(self) -> "ValidatorBuilder":
        return self.with_validator(IsNotNullValidator())

    def is_equal_to(self, expected: Any) -> "ValidatorBuilder":
        return self.with_validator(IsEqualValidator(expected))

    def is_in(self, allowed: Iterable[Any]) -> "ValidatorBuilder":
        return self.with_validator(IsInValidator(allowed))

    def must(self, predicate: Callable[[Any], bool]) -> "ValidatorBuilder":
        return self.with_validator(PredicateValidator(predicate))

    # Collections

    def is_not_empty(self) -> "ValidatorBuilder":
        return self.with_validator(IsNotEmptyValidator())

    def is_empty(self) -> "ValidatorBuilder":
        return self.with_validator(IsEmptyValidator())

    def has_number_of_elements(self, number_of_elements: int) -> "ValidatorBuilder":
        return self.with_validator(HasNumberOfElementsValidator(number_of_elements))

    def has_min_number_of_elements(self, min_element_count: int) -> "ValidatorBuilder":
        return self.with_validator(HasMinNumberOfElementsValidator(min_element_count))

    def has_max_number_of_elements(self, max_element_count: int) -> "ValidatorBuilder":
        return self.with_validator(HasMaxNumberOfElementsValidator(max_element_count))

    # Dates

    def is_before(self, reference: date) -> "ValidatorBuilder":
        return self.with_validator(IsBeforeValidator(reference))

    def is_after(self, reference: date) -> "ValidatorBuilder":
        return self.with_validator(IsAfterValidator(reference))

    # Strings

    def contains(self, seed: str) -> "ValidatorBuilder":
        return self.with_validator(ContainsValidator(seed))

    def matches(self, pattern: Union[str, re.Pattern], flags: int = 0) -> "ValidatorBuilder":
        return self.with_validator(MatchesValidator(pattern, flags))

    def is_numeric_string(self) -> "ValidatorBuilder":
        return self.with_validator(IsNumericStringValidator())

    def is_boolean_string(self) -> "ValidatorBuilder":
        return self.with_validator(IsBooleanStringValidator())

    def is_lowercase(self) -> "ValidatorBuilder":
        return self.with_validator(IsLowercaseValidator())

    def is_uppercase(self) -> "ValidatorBuilder":
        return self.with_validator(IsUppercaseValidator())

    # Types

    def is_number(self) -> "ValidatorBuilder":
        return self.with_validator(IsNumberValidator())

    def is_string(self) -> "ValidatorBuilder":
        return self.with_validator(IsStringValidator())

    def is_boolean(self) -> "ValidatorBuilder":
        return self.with_validator(IsBooleanValidator())

    def is_date(self) -> "ValidatorBuilder":
        return self.with_validator(IsDateValidator())

    def build(self) -> PropertyValidationRule:
        """
        Create the configured rule.

        Raises:
            ConfigurationError: If no validator was added
        """
        bound = [
            BoundValidator(validator, code=code, message=message)
            for validator, code, message in zip(self._validators, self._codes, self._messages)
        ]
        return PropertyValidationRule(
            self.get, bound, condition=self.condition, property_name=self.property_name
        )


class AbstractValidator:
    """
    Base class for declarative object validators.

    Subclasses declare rules in setup() using validate_if_defined(),
    validate_if_not_null() and validate_if(). Accessors may be callables or
    dotted property paths; paths also become the failure target. Rules are
    built once, right after setup(), so configuration errors surface when the
    validator is created.
    """

    def __init__(self, engine: Optional[ValidationEngine] = None):
        self._builders: List[ValidatorBuilder] = []
        self.engine = engine or ValidationEngine()
        self.setup()
        self._rules: Tuple[PropertyValidationRule, ...] = tuple(builder.build() for builder in self._builders)

    def setup(self) -> None:
        """Declare the rules of this validator. Override in subclasses."""

    def _start_rule(self, accessor: AccessorLike, condition: ConditionLike) -> ValidatorBuilder:
        get = resolve_accessor(accessor)
        if isinstance(condition, type) and issubclass(condition, ValidationCondition):
            condition = condition(get)
        if not isinstance(condition, ValidationCondition):
            raise ConfigurationError(
                f"condition must be a ValidationCondition, got {type(condition).__name__}"
            )
        property_name = accessor if isinstance(accessor, str) else None
        builder = ValidatorBuilder(get, condition, property_name)
        self._builders.append(builder)
        return builder

    def validate_if_defined(self, accessor: AccessorLike) -> ValidatorBuilder:
        """Start a rule that runs unless the property is absent."""
        return self._start_rule(accessor, WhenDefinedCondition)

    def validate_if_not_null(self, accessor: AccessorLike) -> ValidatorBuilder:
        """Start a rule that runs unless the property is absent or None."""
        return self._start_rule(accessor, WhenNotNullCondition)

    def validate_if(self, accessor: AccessorLike, condition: ConditionLike) -> ValidatorBuilder:
        """
        Start a rule guarded by a caller supplied condition.

        Args:
            accessor: Callable or dotted path reading the property
            condition: Condition instance, or a ValidationCondition subclass
                that is instantiated with the accessor
        """
        return self._start_rule(accessor, condition)

    def rules(self) -> List[PropertyValidationRule]:
        """Return the declared rules in declaration order."""
        return list(self._rules)

    def validate(self, obj: Any) -> ValidationResult:
        """Validate an object against all declared rules."""
        return self.engine.validate(obj, self._rules)

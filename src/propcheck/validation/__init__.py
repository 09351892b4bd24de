"""
Validation System for Propcheck

This package provides the validation composition core and the layers built
around it.

Key Components:
- PropertyValidator: Base class for atomic checks over a single value
- ValidationCondition: Decides whether a rule runs for a given owner
- ValidationFailure: Record of one failed check
- ValidationResult: Accumulator of failures for one validation pass
- PropertyValidationRule: Binding of accessor, condition and validators
- ValidationEngine: Runs rules against an object and builds the result
- AbstractValidator: Fluent, declarative rule definitions
- RuleLoader: Rules from JSON configuration documents
- ValidationReporter: Formats and outputs validation results
"""

from .base import MISSING, PropertyValidator, ValidationFailure, ValidationResult, is_missing
from .builder import AbstractValidator, ValidatorBuilder
from .conditions import (
    ValidationCondition,
    WhenDefinedCondition,
    WhenNotNullCondition,
    property_path,
    read_property,
)
from .engine import ValidationEngine
from .loader import RULES_SCHEMA, RuleLoader
from .reporter import ValidationReporter
from .rule import BoundValidator, PropertyValidationRule

__all__ = [
    "MISSING",
    "is_missing",
    "PropertyValidator",
    "ValidationFailure",
    "ValidationResult",
    "ValidationCondition",
    "WhenDefinedCondition",
    "WhenNotNullCondition",
    "property_path",
    "read_property",
    "BoundValidator",
    "PropertyValidationRule",
    "ValidationEngine",
    "AbstractValidator",
    "ValidatorBuilder",
    "RuleLoader",
    "RULES_SCHEMA",
    "ValidationReporter",
]

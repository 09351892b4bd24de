"""
Propcheck - Object Property Validation Framework

This package validates values extracted from object properties against declared
rules and collects the violations into a structured result. It includes:

- The validation core: validators, conditions, rules and the validation engine
- A catalogue of ready-made validators for collections, dates, strings and types
- A fluent builder for declaring rules on validator classes
- A JSON rule configuration loader and a result reporter
- A small command line interface

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "Propcheck Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("Propcheck requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.exceptions import ConfigurationError, PropcheckError, ValidationError
from .validation import (
    MISSING,
    AbstractValidator,
    PropertyValidationRule,
    PropertyValidator,
    ValidationEngine,
    ValidationFailure,
    ValidationResult,
    WhenDefinedCondition,
    WhenNotNullCondition,
    property_path,
)

__all__ = [
    "MISSING",
    "AbstractValidator",
    "ConfigurationError",
    "PropcheckError",
    "PropertyValidationRule",
    "PropertyValidator",
    "ValidationEngine",
    "ValidationError",
    "ValidationFailure",
    "ValidationResult",
    "WhenDefinedCondition",
    "WhenNotNullCondition",
    "property_path",
]

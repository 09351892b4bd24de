"""
Custom exceptions for the property validation framework.

This module defines the hierarchy of exceptions raised by propcheck. Expected
validation outcomes are never reported through exceptions; they are collected
as data in a ValidationResult. Exceptions are reserved for configuration
faults detected while rules are being built, and for callers that explicitly
ask for an invalid result to be raised.
"""

from typing import Any, List, Optional


class PropcheckError(Exception):
    """
    Base class for all propcheck exceptions.

    Catching this type catches every error raised by the framework itself.
    """


class ConfigurationError(PropcheckError):
    """
    Raised when a validation rule is configured incorrectly.

    This exception is raised at setup time, never while a validation pass is
    running.

    Examples:
        * A rule declared without any validators
        * An accessor that is not callable
        * An unknown validator type in a rule configuration document
        * A rule configuration document that does not match the schema
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"


class ValidationError(PropcheckError):
    """
    Raised on request when a validation result contains failures.

    Attributes:
        failures: Snapshot of the ValidationFailure records of the result
    """

    def __init__(self, message: str, failures: Optional[List[Any]] = None):
        super().__init__(message)
        self.failures = list(failures or [])

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"

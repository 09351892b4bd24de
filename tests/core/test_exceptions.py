"""
Tests for the propcheck exception hierarchy.
"""

import pytest

from propcheck.core.exceptions import ConfigurationError, PropcheckError, ValidationError
from propcheck.validation import ValidationFailure


def test_configuration_error_message():
    """Test configuration error message formatting."""
    error = ConfigurationError("test message")
    assert str(error) == "Configuration Error: test message"


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"
    assert error.failures == []


def test_validation_error_carries_failures():
    """Test that ValidationError keeps its own copy of the failures."""
    failures = [ValidationFailure(code="E1")]
    error = ValidationError("failed", failures)
    failures.append(ValidationFailure(code="E2"))

    assert error.failures == [ValidationFailure(code="E1")]


def test_hierarchy():
    """Test that all errors derive from PropcheckError."""
    assert issubclass(ConfigurationError, PropcheckError)
    assert issubclass(ValidationError, PropcheckError)

    with pytest.raises(PropcheckError):
        raise ConfigurationError("boom")

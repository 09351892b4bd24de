"""
Core definitions shared by every part of propcheck.

At the moment this is the exception hierarchy used to report configuration
faults and to turn invalid results into exceptions on request.
"""

from .exceptions import ConfigurationError, PropcheckError, ValidationError

__all__ = [
    "PropcheckError",
    "ConfigurationError",
    "ValidationError",
]

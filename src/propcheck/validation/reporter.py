"""
Validation Reporter Components for Propcheck

This module provides components for formatting and outputting validation results
in various formats. It supports:
- Human-readable string formatting
- Dictionary conversion
- JSON serialization

The reporter only reads a ValidationResult through its public queries, so it
never changes the result it renders.
"""

import json
from typing import Any, Dict, Optional

from .base import ValidationFailure, ValidationResult


class ValidationReporter:
    """
    Reporter for formatting and outputting validation results.

    This class provides static methods for converting ValidationResult instances
    into various formats suitable for different use cases, such as human-readable
    output, dictionary representation, or JSON serialization.
    """

    @staticmethod
    def _target_label(target: Any) -> Optional[str]:
        return None if target is None else str(target)

    @staticmethod
    def format_failure(failure: ValidationFailure) -> str:
        """
        Format one failure as a single line.

        Example:
            >>> ValidationReporter.format_failure(ValidationFailure("E1", "Name required", "name"))
            '[E1] name: Name required'
        """
        parts = []
        if failure.code:
            parts.append(f"[{failure.code}]")
        target = ValidationReporter._target_label(failure.target)
        message = failure.message or "check failed"
        parts.append(f"{target}: {message}" if target else message)
        return " ".join(parts)

    @staticmethod
    def format_result(result: ValidationResult) -> str:
        """
        Format a validation result as a human-readable string.

        Args:
            result: ValidationResult instance to format

        Returns:
            str: Formatted string representation of the validation result

        Example:
            >>> print(ValidationReporter.format_result(result))
            Validation failed with the following errors:
              - [E1] name: Name required
        """
        if result.is_valid():
            return "Validation passed successfully"

        lines = ["Validation failed with the following errors:"]
        for failure in result.get_failures():
            lines.append(f"  - {ValidationReporter.format_failure(failure)}")
        return "\n".join(lines)

    @staticmethod
    def to_dict(result: ValidationResult) -> Dict[str, Any]:
        """
        Convert a validation result to a dictionary.

        Args:
            result: ValidationResult instance to convert

        Returns:
            Dict[str, Any]: Dictionary representation of the validation result

        Example:
            >>> ValidationReporter.to_dict(result)
            {
                'is_valid': False,
                'failures': [{'code': 'E1', 'message': 'Name required', 'target': 'name'}],
                'messages': ['Name required'],
                'codes': ['E1']
            }
        """
        return {
            "is_valid": result.is_valid(),
            "failures": [
                {
                    "code": failure.code,
                    "message": failure.message,
                    "target": ValidationReporter._target_label(failure.target),
                }
                for failure in result.get_failures()
            ],
            "messages": result.get_failure_messages(),
            "codes": result.get_failure_codes(),
        }

    @staticmethod
    def to_json(result: ValidationResult, indent: Optional[int] = 2) -> str:
        """
        Convert a validation result to JSON.

        Args:
            result: ValidationResult instance to convert
            indent: Indentation passed to json.dumps, None for compact output

        Returns:
            str: JSON string representation of the validation result
        """
        return json.dumps(ValidationReporter.to_dict(result), indent=indent)

"""
Validation Engine for Propcheck

The engine runs a set of property validation rules against one object and
folds the outcome into a ValidationResult. Rules are evaluated in declaration
order, so the failure order of a result is reproducible. The engine keeps no
state between passes; every call starts from an empty result.
"""

import logging
from typing import Any, Iterable

from .base import ValidationResult
from .rule import PropertyValidationRule

logger = logging.getLogger(__name__)


class ValidationEngine:
    """
    Orchestrator applying property validation rules to objects.

    Example:
        >>> rule = PropertyValidationRule(
        ...     lambda p: p["name"], [BoundValidator(IsNotEmptyValidator(), message="Name required")]
        ... )
        >>> result = ValidationEngine().validate({"name": ""}, [rule])
        >>> result.get_failure_messages()
        ['Name required']
    """

    def validate(self, obj: Any, rules: Iterable[PropertyValidationRule]) -> ValidationResult:
        """
        Run one validation pass.

        Args:
            obj: Object whose properties are validated
            rules: Rules to evaluate, in order

        Returns:
            ValidationResult: Fresh result holding the failures of this pass
        """
        result = ValidationResult()
        evaluated = 0

        for rule in rules:
            result.add_failures(rule.validate(obj))
            evaluated += 1

        logger.debug(
            f"Validated {type(obj).__name__} against {evaluated} rule(s): "
            f"{len(result)} failure(s)"
        )
        return result

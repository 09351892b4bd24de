"""
Rule Configuration Loader for Propcheck

This module builds property validation rules from configuration documents.
A document lists rules, each naming a dotted property path, an optional
condition policy and the validators to apply:

    {
      "rules": [
        {
          "property": "address.city",
          "condition": "not_null",
          "validators": [
            {"type": "not_empty", "code": "E_CITY", "message": "City is required"},
            {"type": "max_elements", "args": {"max_element_count": 64}}
          ]
        }
      ]
    }

Documents are checked against RULES_SCHEMA with jsonschema before any rule
is built. Every problem is reported as a ConfigurationError.
"""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

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
)
from .base import PropertyValidator
from .conditions import WhenDefinedCondition, WhenNotNullCondition, property_path
from .rule import BoundValidator, PropertyValidationRule

logger = logging.getLogger(__name__)

RULES_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "rules": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "property": {"type": "string", "minLength": 1},
                    "condition": {"type": "string", "enum": ["defined", "not_null"]},
                    "validators": {
                        "type": "array",
                        "minItems": 1,
                        "items": {
                            "type": "object",
                            "properties": {
                                "type": {"type": "string", "minLength": 1},
                                "code": {"type": "string"},
                                "message": {"type": "string"},
                                "args": {"type": "object"},
                            },
                            "required": ["type"],
                            "additionalProperties": False,
                        },
                    },
                },
                "required": ["property", "validators"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["rules"],
}

CONDITIONS = {
    "defined": WhenDefinedCondition,
    "not_null": WhenNotNullCondition,
}


def _parse_date(value: Any) -> Union[date, datetime]:
    """Accept ISO 8601 strings for date arguments; a time part makes a datetime."""
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value) if "T" in value else date.fromisoformat(value)
        except ValueError as e:
            raise ConfigurationError(f"invalid ISO date {value!r}: {e}") from e
    return value


VALIDATOR_TYPES: Dict[str, Callable[..., PropertyValidator]] = {
    "defined": IsDefinedValidator,
    "not_null": IsNotNullValidator,
    "equal": IsEqualValidator,
    "in": IsInValidator,
    "not_empty": IsNotEmptyValidator,
    "empty": IsEmptyValidator,
    "number_of_elements": HasNumberOfElementsValidator,
    "min_elements": HasMinNumberOfElementsValidator,
    "max_elements": HasMaxNumberOfElementsValidator,
    "before": lambda reference: IsBeforeValidator(_parse_date(reference)),
    "after": lambda reference: IsAfterValidator(_parse_date(reference)),
    "contains": ContainsValidator,
    "matches": MatchesValidator,
    "numeric_string": IsNumericStringValidator,
    "boolean_string": IsBooleanStringValidator,
    "lowercase": IsLowercaseValidator,
    "uppercase": IsUppercaseValidator,
    "number": IsNumberValidator,
    "string": IsStringValidator,
    "boolean": IsBooleanValidator,
    "date": IsDateValidator,
}


class RuleLoader:
    """
    Builds PropertyValidationRule instances from configuration documents.

    Attributes:
        strict (bool): If True, unknown validator types raise
            ConfigurationError; otherwise they are logged and skipped
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    def load(self, config: Dict[str, Any]) -> List[PropertyValidationRule]:
        """
        Build rules from a configuration dictionary.

        Args:
            config: Document matching RULES_SCHEMA

        Returns:
            List[PropertyValidationRule]: Rules in document order

        Raises:
            ConfigurationError: If the document is malformed or names an
                unknown validator type in strict mode
        """
        try:
            json_validate(instance=config, schema=RULES_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Rule configuration is invalid: {e.message}") from e

        rules = []
        for rule_config in config["rules"]:
            rule = self._build_rule(rule_config)
            if rule is not None:
                rules.append(rule)

        logger.info(f"Loaded {len(rules)} validation rule(s)")
        return rules

    def load_file(self, path: Union[str, Path]) -> List[PropertyValidationRule]:
        """
        Build rules from a JSON file.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(path, "r") as f:
                config = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read rule configuration {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in rule configuration {path}: {e}") from e
        return self.load(config)

    def _build_rule(self, rule_config: Dict[str, Any]) -> Optional[PropertyValidationRule]:
        path = rule_config["property"]
        get = property_path(path)
        condition = CONDITIONS[rule_config.get("condition", "defined")](get)

        bound = []
        for validator_config in rule_config["validators"]:
            validator = self._build_validator(path, validator_config)
            if validator is not None:
                bound.append(
                    BoundValidator(
                        validator,
                        code=validator_config.get("code"),
                        message=validator_config.get("message"),
                    )
                )

        if not bound:
            logger.warning(f"No usable validators for property '{path}', skipping rule")
            return None
        return PropertyValidationRule(get, bound, condition=condition, property_name=path)

    def _build_validator(self, path: str, validator_config: Dict[str, Any]) -> Optional[PropertyValidator]:
        validator_type = validator_config["type"]
        factory = VALIDATOR_TYPES.get(validator_type)
        if factory is None:
            if self.strict:
                raise ConfigurationError(
                    f"Unknown validator type '{validator_type}' for property '{path}'"
                )
            logger.warning(f"Unknown validator type '{validator_type}' for property '{path}', skipping")
            return None

        args = validator_config.get("args", {})
        try:
            return factory(**args)
        except TypeError as e:
            raise ConfigurationError(
                f"Invalid arguments for validator '{validator_type}' on property '{path}': {e}"
            ) from e

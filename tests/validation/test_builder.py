"""
Tests for the fluent AbstractValidator / ValidatorBuilder API.
"""

from datetime import date

import pytest

from propcheck.core.exceptions import ConfigurationError
from propcheck.validation import (
    AbstractValidator,
    PropertyValidationRule,
    ValidationCondition,
    WhenDefinedCondition,
    WhenNotNullCondition,
)
from propcheck.validators import IsNotEmptyValidator


class PersonValidator(AbstractValidator):
    def setup(self):
        self.validate_if_defined(lambda p: p.name).is_not_empty().with_code("E_NAME").with_message(
            "Name must not be empty"
        ).with_property_name("name")
        self.validate_if_not_null("address.city").is_string().with_message("City must be text").is_uppercase()
        self.validate_if_defined("tags").has_min_number_of_elements(1).with_code("E_TAGS")


class AlwaysCondition(ValidationCondition):
    def should_do_validation(self, owner):
        return True


def test_valid_person(person):
    """Test that a well formed person passes."""
    person.address.city = "LONDON"

    result = PersonValidator().validate(person)

    assert result.is_valid()


def test_invalid_person_reports_in_declaration_order(person):
    """Test failures, codes and targets produced by declared rules."""
    person.name = ""
    person.tags = []

    result = PersonValidator().validate(person)

    assert result.get_failure_codes() == ["E_NAME", "E_TAGS"]
    assert result.get_failure_messages() == ["Name must not be empty"]
    assert [failure.target for failure in result.get_failures()] == ["name", "address.city", "tags"]


def test_not_null_rule_skipped_for_missing_address(person):
    """Test that path accessors skip the rule when an intermediate is None."""
    person.address = None

    result = PersonValidator().validate(person)

    assert result.is_valid()


def test_rules_are_built_in_declaration_order():
    """Test the rules produced by a validator class."""
    rules = PersonValidator().rules()

    assert all(isinstance(rule, PropertyValidationRule) for rule in rules)
    assert [rule.property_name for rule in rules] == ["name", "address.city", "tags"]
    assert isinstance(rules[0].condition, WhenDefinedCondition)
    assert isinstance(rules[1].condition, WhenNotNullCondition)
    assert len(rules[1].validators) == 2
    assert rules[1].validators[0].message == "City must be text"
    assert rules[1].validators[1].message is None


def test_validate_if_with_condition_class():
    """Test that a condition class is instantiated with the accessor."""

    class DictValidator(AbstractValidator):
        def setup(self):
            self.validate_if(lambda d: d.get("name"), AlwaysCondition).is_not_null().with_code("REQUIRED")

    assert DictValidator().validate({}).get_failure_codes() == ["REQUIRED"]
    assert DictValidator().validate({"name": "x"}).is_valid()


def test_validate_if_with_condition_instance():
    """Test that a ready condition instance is used as is."""

    class DictValidator(AbstractValidator):
        def setup(self):
            self.validate_if("name", WhenNotNullCondition(lambda d: d.get("flag"))).is_not_empty()

    assert DictValidator().validate({"flag": None, "name": ""}).is_valid()
    assert DictValidator().validate({"flag": True, "name": ""}).is_invalid()


def test_catalogue_methods():
    """Test a selection of builder check methods end to end."""

    class EventValidator(AbstractValidator):
        def setup(self):
            self.validate_if_defined("day").is_date().is_before(date(2030, 1, 1)).is_after(date(2000, 1, 1))
            self.validate_if_defined("count").is_numeric_string().with_code("E_COUNT")
            self.validate_if_defined("flag").is_boolean_string().with_code("E_FLAG")
            self.validate_if_defined("kind").is_in(["a", "b"]).with_code("E_KIND")
            self.validate_if_defined("slug").matches(r"^[a-z-]+$").is_lowercase().contains("-")
            self.validate_if_defined("items").has_number_of_elements(2).has_max_number_of_elements(2)
            self.validate_if_defined("score").is_number().must(lambda v: v >= 0).with_code("E_SCORE")
            self.validate_if_defined("status").is_equal_to("ok")
            self.validate_if_defined("extra").is_empty()
            self.validate_if_defined("active").is_boolean()
            self.validate_if_defined("label").is_defined().is_not_null()

    good = {
        "day": date(2020, 5, 17),
        "count": "12",
        "flag": "true",
        "kind": "a",
        "slug": "a-b",
        "items": [1, 2],
        "score": 3,
        "status": "ok",
        "extra": [],
        "active": False,
        "label": "x",
    }
    assert EventValidator().validate(good).is_valid()

    bad = dict(good, count="twelve", flag="yes", kind="c", score=-1)
    assert EventValidator().validate(bad).get_failure_codes() == ["E_COUNT", "E_FLAG", "E_KIND", "E_SCORE"]


def test_with_validator_accepts_custom_validators():
    """Test adding an arbitrary validator instance."""

    class TagsValidator(AbstractValidator):
        def setup(self):
            self.validate_if_defined("tags").with_validator(IsNotEmptyValidator()).with_code("E1")

    assert TagsValidator().validate({"tags": []}).get_failure_codes() == ["E1"]


def test_with_validator_rejects_non_validators():
    """Test that with_validator only accepts PropertyValidator instances."""
    builder = AbstractValidator().validate_if_defined("x")

    with pytest.raises(ConfigurationError, match="PropertyValidator"):
        builder.with_validator(lambda v: True)  # type: ignore[arg-type]


@pytest.mark.parametrize("option", ["with_message", "with_code"])
def test_failure_options_require_a_validator(option):
    """Test that failure data cannot be set before a validator is added."""
    builder = AbstractValidator().validate_if_defined("x")

    with pytest.raises(ConfigurationError, match=option):
        getattr(builder, option)("value")


def test_rule_without_validators_is_rejected_at_construction():
    """Test that an empty rule declaration fails when the validator is created."""

    class EmptyRuleValidator(AbstractValidator):
        def setup(self):
            self.validate_if_defined("x")

    with pytest.raises(ConfigurationError):
        EmptyRuleValidator()


def test_invalid_accessor_and_condition():
    """Test configuration errors for malformed accessors and conditions."""
    validator = AbstractValidator()

    with pytest.raises(ConfigurationError, match="accessor"):
        validator.validate_if_defined(42)  # type: ignore[arg-type]
    with pytest.raises(ConfigurationError, match="ValidationCondition"):
        validator.validate_if("x", object())  # type: ignore[arg-type]


def test_base_validator_without_rules_is_valid():
    """Test that a validator with no declared rules accepts anything."""
    assert AbstractValidator().validate(object()).is_valid()


def test_rules_are_built_once():
    """Test that every pass reuses the rules built at construction."""
    validator = PersonValidator()

    assert validator.rules() == validator.rules()
    assert validator.rules()[0] is validator.rules()[0]


def test_validate_if_with_separate_condition_accessor_skips_faulting_property():
    """Test that a rule accessor fault is skipped even when its condition passes."""

    class AddressValidator(AbstractValidator):
        def setup(self):
            self.validate_if(lambda p: p["address"]["city"], WhenDefinedCondition(lambda p: p["address"])).is_not_empty()

    validator = AddressValidator()

    assert validator.validate({"address": {}}).is_valid()
    assert validator.validate({"address": {"city": ""}}).is_invalid()

"""Tests for the rule engine."""

import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import pytest

from strongpass import (
    EasySpanRule,
    MinimumLengthRule,
    Rule,
    Severity,
    ValidationResult,
    Validator,
    ValidatorFrozenError,
)
from strongpass.utils.logging import logger


@dataclass(frozen=True)
class NoSpacesRule(Rule):
    """Advisory rule used to exercise warning routing."""

    name = "no_spaces"
    description = "Spaces are hard to type on some devices."
    severity = Severity.WARNING

    def check(self, password):
        if " " in password:
            return "Password contains spaces"
        return None


class TestEmptyValidator:
    """Test a validator with no rules."""

    def test_empty_password(self, validator):
        """No rules, empty input: zero strength and no errors."""
        result = validator.validate("")
        assert result.strength == 0.0
        assert result.errors == ()
        assert result.warnings == ()
        assert not result.has_errors

    def test_strength_still_computed(self, validator):
        """Strength is computed without any rules."""
        assert validator.validate("laval").strength == pytest.approx(5 * math.log2(26))


class TestRuleOrdering:
    """Test registration and evaluation order."""

    def test_errors_follow_registration_order(self, validator):
        """Messages appear in the order rules were added."""
        validator.minimum_character_count(10).no_easy_spans()
        result = validator.validate("qwerty")
        assert result.errors == (
            "Password must be at least 10 characters.",
            "Password contains 'qwer'",
        )

    def test_duplicates_allowed(self, validator):
        """Adding the same rule twice reports twice."""
        validator.add_rule(MinimumLengthRule()).add_rule(MinimumLengthRule())
        assert validator.validate("short").errors == (
            "Password must be at least 8 characters.",
            "Password must be at least 8 characters.",
        )

    def test_rules_snapshot(self, validator):
        """rules returns the registered rules as a tuple."""
        validator.no_common_passwords().no_easy_spans(5)
        assert isinstance(validator.rules, tuple)
        assert [rule.name for rule in validator.rules] == ["common_passwords", "easy_spans"]
        assert validator.rules[1] == EasySpanRule(length=5)


class TestStandardBundle:
    """Test with_standard_rules()."""

    def test_all_three_findings_in_order(self, standard_validator):
        """asdfasd triggers span, repetition and length, in that order."""
        result = standard_validator.validate("asdfasd")
        assert result.errors == (
            "Password contains 'asdf'",
            "Password contains repeated substring: asd",
            "Password must be at least 8 characters.",
        )
        assert result.has_errors

    def test_common_password_first(self, standard_validator):
        """Common password finding leads the list."""
        assert standard_validator.validate("letmein").errors[0] == "Password is common: 'letmein'"

    def test_strong_password_passes(self, standard_validator):
        """A password tripping no heuristic has no errors."""
        result = standard_validator.validate("Xk9#mL2$vQ7!")
        assert result.errors == ()
        assert not result.has_errors
        assert result.strength == pytest.approx(12 * math.log2(76))

    def test_bundle_has_four_rules(self, standard_validator):
        """The bundle registers four rules."""
        assert len(standard_validator.rules) == 4


class TestWarnings:
    """Test severity routing."""

    def test_warning_rules_populate_warnings(self, validator):
        """Warning-severity messages go to warnings, not errors."""
        validator.add_rule(NoSpacesRule()).minimum_character_count()
        result = validator.validate("a b")
        assert result.warnings == ("Password contains spaces",)
        assert result.errors == ("Password must be at least 8 characters.",)

    def test_warnings_alone_are_not_errors(self, validator):
        """has_errors ignores warnings."""
        validator.add_rule(NoSpacesRule())
        result = validator.validate("correct horse battery staple")
        assert result.warnings
        assert not result.has_errors


class TestFreezing:
    """Test configuration lock after first use."""

    def test_add_after_validate_raises(self, validator):
        """The first validate() freezes the rule list."""
        validator.no_common_passwords()
        validator.validate("anything")
        assert validator.frozen
        with pytest.raises(ValidatorFrozenError):
            validator.no_easy_spans()
        assert len(validator.rules) == 1

    def test_explicit_freeze(self, validator):
        """freeze() blocks registration before any validation."""
        validator.freeze()
        with pytest.raises(ValidatorFrozenError):
            validator.add_rule(MinimumLengthRule())

    def test_concurrent_validation(self, standard_validator):
        """A frozen validator can be shared across threads."""
        standard_validator.freeze()
        passwords = ["asdfasd", "letmein", "Xk9#mL2$vQ7!", "gregre"] * 25
        expected = [standard_validator.validate(pw) for pw in passwords]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(standard_validator.validate, passwords))

        assert results == expected


class TestValidationResult:
    """Test the result object."""

    def test_idempotent(self, standard_validator):
        """Validating twice returns equal results."""
        assert standard_validator.validate("asdfasd") == standard_validator.validate("asdfasd")

    def test_default_collections_are_empty_tuples(self):
        """Omitted errors and warnings default to the empty tuple."""
        result = ValidationResult(strength=0.0)
        assert result.errors == ()
        assert result.warnings == ()
        assert type(result.errors) is tuple

    def test_immutable(self):
        """Results cannot be modified."""
        import dataclasses

        result = ValidationResult(strength=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.strength = 2.0

    def test_to_dict(self):
        """to_dict() exposes lists for JSON."""
        result = ValidationResult(strength=3.5, errors=("a", "b"))
        assert result.to_dict() == {
            "strength": 3.5,
            "errors": ["a", "b"],
            "warnings": [],
            "has_errors": True,
        }

    @pytest.mark.parametrize("password", ["", "é", " " * 50, "x" * 10_000, "\x00\n\t"])
    def test_never_raises(self, standard_validator, password):
        """Any string is accepted."""
        result = standard_validator.validate(password)
        assert result.strength >= 0


class TestLogging:
    """Test logging behavior of the engine."""

    def test_password_never_logged(self, standard_validator):
        """Debug logs carry counts, not the password."""
        records = []
        handler_id = logger.add(records.append, level="DEBUG", format="{message}")
        try:
            standard_validator.validate("s3cr3t-Passw0rd")
        finally:
            logger.remove(handler_id)

        assert records
        assert all("s3cr3t-Passw0rd" not in str(record) for record in records)

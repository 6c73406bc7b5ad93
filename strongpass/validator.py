"""Rule engine: ordered rule registration and password validation."""

from dataclasses import dataclass
from typing import Any

from strongpass import entropy
from strongpass.rules import (
    STANDARD_RULES,
    CommonPasswordRule,
    EasySpanRule,
    InternalRepetitionRule,
    MinimumLengthRule,
    Rule,
    Severity,
)
from strongpass.utils.logging import logger


class ValidatorFrozenError(RuntimeError):
    """Raised when a rule is added after the validator has been used."""


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validate() call."""

    strength: float
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "strength": self.strength,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "has_errors": self.has_errors,
        }


class Validator:
    """Ordered collection of password rules.

    Rules run in registration order. The first validate() call freezes the
    rule list so a configured validator can be shared between threads
    without locking.
    """

    def __init__(self):
        self._rules: list[Rule] = []
        self._frozen = False

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Validator":
        """Disallow further rule registration."""
        self._frozen = True
        return self

    def add_rule(self, rule: Rule) -> "Validator":
        """Append a rule. Duplicates are allowed."""
        if self._frozen:
            raise ValidatorFrozenError(
                f"Cannot add rule '{rule.name}': validator is frozen after first use"
            )
        self._rules.append(rule)
        logger.debug("Registered rule {name} at position {pos}", name=rule.name, pos=len(self._rules))
        return self

    def no_common_passwords(self) -> "Validator":
        return self.add_rule(CommonPasswordRule())

    def no_easy_spans(self, length: int = 4) -> "Validator":
        return self.add_rule(EasySpanRule(length=length))

    def no_internal_repetition(self, length: int = 3) -> "Validator":
        return self.add_rule(InternalRepetitionRule(length=length))

    def minimum_character_count(self, minimum: int = 8) -> "Validator":
        return self.add_rule(MinimumLengthRule(minimum=minimum))

    def with_standard_rules(self) -> "Validator":
        """Add the standard bundle with default parameters, in bundle order."""
        for rule_class in STANDARD_RULES:
            self.add_rule(rule_class())
        return self

    def validate(self, password: str) -> ValidationResult:
        """Run every rule against the password and estimate its strength."""
        self._frozen = True

        errors: list[str] = []
        warnings: list[str] = []
        for rule in self._rules:
            message = rule.check(password)
            if not message:
                continue
            if rule.severity is Severity.WARNING:
                warnings.append(message)
            else:
                errors.append(message)

        strength = entropy.estimate(password)
        logger.debug(
            "Validated password against {count} rules: {errors} errors, {warnings} warnings, strength {strength:.2f}",
            count=len(self._rules),
            errors=len(errors),
            warnings=len(warnings),
            strength=strength,
        )
        return ValidationResult(strength=strength, errors=tuple(errors), warnings=tuple(warnings))

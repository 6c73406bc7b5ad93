"""Base contracts for password rules."""

from abc import ABC, abstractmethod
from enum import Enum


class Severity(Enum):
    """Where a rule's message lands in a ValidationResult."""

    ERROR = "error"
    WARNING = "warning"


class Rule(ABC):
    """A pure check mapping a password to an optional violation message.

    Concrete rules are frozen dataclasses carrying their parameters as
    fields. ``check`` must never raise for any string input.
    """

    name: str = "rule"
    description: str = ""
    severity: Severity = Severity.ERROR

    @abstractmethod
    def check(self, password: str) -> str | None:
        """Return a violation message, or None when the password passes."""

    def parameters(self) -> dict[str, int]:
        """Tunable parameters, for display."""
        return {}


def require_positive(value: int, field_name: str) -> None:
    """Reject window and minimum lengths that are not positive integers."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{field_name} must be a positive integer, got {value!r}")

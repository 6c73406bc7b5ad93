"""Minimum character count."""

from dataclasses import dataclass

from strongpass.rules.base import Rule, require_positive


@dataclass(frozen=True)
class MinimumLengthRule(Rule):
    """Flag passwords shorter than ``minimum`` characters.

    Length is counted in code points, so "pässwörd" is 8 characters.
    """

    minimum: int = 8

    name = "minimum_length"
    description = "Your password is too short. Try adding more characters."

    def __post_init__(self):
        require_positive(self.minimum, "minimum")

    def check(self, password: str) -> str | None:
        if len(password) < self.minimum:
            return f"Password must be at least {self.minimum} characters."
        return None

    def parameters(self) -> dict[str, int]:
        return {"minimum": self.minimum}

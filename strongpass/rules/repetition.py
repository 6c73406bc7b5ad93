"""Internal repetition detection."""

from dataclasses import dataclass

from strongpass.rules.base import Rule, require_positive


@dataclass(frozen=True)
class InternalRepetitionRule(Rule):
    """Flag passwords where a substring of ``length`` chars occurs again later.

    The repeat must start at or after the end of the first occurrence, so
    overlapping runs like "aaaa" (length 3) do not count.
    """

    length: int = 3

    name = "internal_repetition"
    description = "Your password contains repeated strings of characters."

    def __post_init__(self):
        require_positive(self.length, "length")

    def check(self, password: str) -> str | None:
        for i in range(len(password) - self.length + 1):
            unit = password[i : i + self.length]
            if password.find(unit, i + self.length) != -1:
                return f"Password contains repeated substring: {unit}"
        return None

    def parameters(self) -> dict[str, int]:
        return {"length": self.length}

"""Easily typed character runs: keyboard rows, columns, alphabet and digits."""

from dataclasses import dataclass

from strongpass.rules.base import Rule, require_positive

QWERTY_ROW_1 = "qwertyuiop"
QWERTY_ROW_2 = "asdfghjkl"
QWERTY_ROW_3 = "zxcvbnm"
ALPHABET = "abcdefghijklmnopqrstuvwxyz"
NUMERALS = "123456789012345678909876543210"
QWERTY_NUMBER_COLUMN = "1q2w3e4r5t6y7u8i9o0p"
QWERTY_COLUMNS = "1qaz2wsx3edc4rfv5tgb6yhn7ujm8ik9ol0p"
QWERTY_ROWS_BY_3 = "123qweasdzxc456rtyfghvbn789uiojklm"

# Scan order matters: the first span containing a match is reported.
EASY_SPANS = (
    QWERTY_ROW_1,
    QWERTY_ROW_2,
    QWERTY_ROW_3,
    ALPHABET,
    NUMERALS,
    QWERTY_NUMBER_COLUMN,
    QWERTY_COLUMNS,
    QWERTY_ROWS_BY_3,
)


def windows(span: str, length: int):
    """Yield every contiguous substring of ``span`` with exactly ``length`` chars."""
    for offset in range(len(span) - length + 1):
        yield span[offset : offset + length]


@dataclass(frozen=True)
class EasySpanRule(Rule):
    """Flag passwords containing a run from one of the easy spans."""

    length: int = 4
    spans: tuple[str, ...] = EASY_SPANS

    name = "easy_spans"
    description = "Your password contains easily guessable strings of characters."

    def __post_init__(self):
        require_positive(self.length, "length")

    def check(self, password: str) -> str | None:
        for span in self.spans:
            for run in windows(span, self.length):
                if run in password:
                    return f"Password contains '{run}'"
        return None

    def parameters(self) -> dict[str, int]:
        return {"length": self.length}

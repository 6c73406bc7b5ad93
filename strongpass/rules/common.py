"""Common password detection.

Matches are exact: a password is flagged only when it equals a known weak
password, or a known weak password followed by a common suffix. Passwords
that merely contain a common word are left to the other rules.
"""

from dataclasses import dataclass

from strongpass.rules.base import Rule

COMMON_PASSWORDS = (
    "root",
    "master",
    "1234",
    "letmein",
    "password",
    "qwerty",
    "admin",
    "shadow",
    "hello",
    "password1",
    "trustno1",
    "abc123",
    "iloveyou",
    "monkey",
    "123321",
    "dragon",
    "123",
    "myspace1",
    "121212",
    "123abc",
    "tinkle",
    "princess",
    "football",
    "jessica",
    "love",
)

COMMON_SUFFIXES = ("1", "12", "123", "1234", "!", "!!", "01", "69")


@dataclass(frozen=True)
class CommonPasswordRule(Rule):
    """Flag passwords found on the common password list."""

    passwords: tuple[str, ...] = COMMON_PASSWORDS
    suffixes: tuple[str, ...] = COMMON_SUFFIXES

    name = "common_passwords"
    description = "Your password contains a commonly used password."

    def check(self, password: str) -> str | None:
        if password in self.passwords:
            return f"Password is common: '{password}'"

        for common in self.passwords:
            if not password.startswith(common):
                continue
            for suffix in self.suffixes:
                if password == common + suffix:
                    return f"Password is common: '{password}'"

        return None

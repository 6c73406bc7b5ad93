"""Character-pool entropy estimate for password strings.

The estimate is a theoretical upper bound on brute-force search space:
length * log2(alphabet), where the alphabet is inferred from which fixed
character pools the password touches. It is NOT Shannon entropy of the
observed character distribution.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class CharacterPool:
    """A named, fixed set of characters."""

    name: str
    characters: frozenset[str]

    @property
    def size(self) -> int:
        return len(self.characters)

    def matches(self, password: str) -> bool:
        """True if at least one character of the password is in this pool."""
        return any(c in self.characters for c in password)


LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SPECIAL = "!@#$%^&*-_=+? "

# Evaluation order is fixed so results are reproducible.
CHARACTER_POOLS = (
    CharacterPool("lowercase", frozenset(LOWERCASE)),
    CharacterPool("uppercase", frozenset(UPPERCASE)),
    CharacterPool("digits", frozenset(DIGITS)),
    CharacterPool("special", frozenset(SPECIAL)),
)


def matched_pools(password: str) -> list[CharacterPool]:
    """Return the pools the password draws from, in pool order."""
    return [pool for pool in CHARACTER_POOLS if pool.matches(password)]


def estimate(password: str) -> float:
    """Estimate password strength in bits.

    Each matched pool contributes its full size once. When no pool matches,
    the password length stands in for the alphabet size.
    """
    length = len(password)
    if length == 0:
        return 0.0

    alphabet = sum(pool.size for pool in matched_pools(password))
    if alphabet < 1:
        alphabet = length

    return length * math.log2(alphabet)

"""strongpass - heuristic password validation and strength estimation."""

__version__ = "1.0.0"

from strongpass.entropy import CHARACTER_POOLS, CharacterPool, estimate
from strongpass.rules import (
    CommonPasswordRule,
    EasySpanRule,
    InternalRepetitionRule,
    MinimumLengthRule,
    Rule,
    Severity,
)
from strongpass.validator import ValidationResult, Validator, ValidatorFrozenError

__all__ = [
    "__version__",
    "CHARACTER_POOLS",
    "CharacterPool",
    "estimate",
    "Rule",
    "Severity",
    "CommonPasswordRule",
    "EasySpanRule",
    "InternalRepetitionRule",
    "MinimumLengthRule",
    "ValidationResult",
    "Validator",
    "ValidatorFrozenError",
]

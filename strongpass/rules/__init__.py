"""Built-in password rules."""

from .base import Rule, Severity
from .common import COMMON_PASSWORDS, COMMON_SUFFIXES, CommonPasswordRule
from .length import MinimumLengthRule
from .repetition import InternalRepetitionRule
from .spans import EASY_SPANS, EasySpanRule

# Bundle order: messages appear in this order when several rules fire.
STANDARD_RULES = (
    CommonPasswordRule,
    EasySpanRule,
    InternalRepetitionRule,
    MinimumLengthRule,
)

RULE_REGISTRY: dict[str, type[Rule]] = {rule.name: rule for rule in STANDARD_RULES}


__all__ = [
    "Rule",
    "Severity",
    "CommonPasswordRule",
    "EasySpanRule",
    "InternalRepetitionRule",
    "MinimumLengthRule",
    "COMMON_PASSWORDS",
    "COMMON_SUFFIXES",
    "EASY_SPANS",
    "STANDARD_RULES",
    "RULE_REGISTRY",
]

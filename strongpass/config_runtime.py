"""Runtime configuration for strongpass - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from strongpass.rules import (
    CommonPasswordRule,
    EasySpanRule,
    InternalRepetitionRule,
    MinimumLengthRule,
)
from strongpass.utils.logging import logger
from strongpass.validator import Validator

DEFAULTS = {
    "rules": {
        "common_passwords": True,
        "easy_spans": True,
        "internal_repetition": True,
        "minimum_length": True,
        "span_length": 4,
        "repetition_length": 3,
        "min_length": 8,
    },
    "policy": {
        "min_strength": 0.0,
    },
}

# Window and minimum lengths; zero or negative values are rejected.
POSITIVE_KEYS = frozenset([
    ("rules", "span_length"),
    ("rules", "repetition_length"),
    ("rules", "min_length"),
])


def _coerce(value: str, default_value: Any, positive: bool = False) -> Any:
    """Convert an environment string to the type of its default."""
    if isinstance(default_value, bool):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ValueError("expected a boolean")
    if isinstance(default_value, int):
        number = int(value)
        if positive and number < 1:
            raise ValueError("expected a positive integer")
        return number
    if isinstance(default_value, float):
        return float(value)
    return value


def _accepts(default_value: Any, value: Any) -> bool:
    """Type check for config file values; bools never stand in for numbers."""
    if isinstance(default_value, bool) or isinstance(value, bool):
        return isinstance(default_value, bool) and isinstance(value, bool)
    if isinstance(default_value, float):
        return isinstance(value, (int, float))
    return isinstance(value, type(default_value))


def load_runtime_config(root: str = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .strongpass/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (STRONGPASS_<SECTION>_<KEY>)
    2. .strongpass/config.json file
    3. Built-in defaults

    Args:
        root: Root directory to look for config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / ".strongpass" / "config.json"
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key not in cfg[section] or not _accepts(cfg[section][key], value):
                                continue
                            if (section, key) in POSITIVE_KEYS and value < 1:
                                logger.warning(
                                    "Ignoring {section}.{key}={value} in {path}: must be a positive integer",
                                    section=section,
                                    key=key,
                                    value=value,
                                    path=path,
                                )
                                continue
                            cfg[section][key] = value
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not load config file from {path}: {err}", path=path, err=e)
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"STRONGPASS_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    cfg[section][key] = _coerce(
                        value, cfg[section][key], positive=(section, key) in POSITIVE_KEYS
                    )
                except ValueError as e:
                    logger.warning(
                        "Invalid value for environment variable {var}: '{value}' - {err}",
                        var=env_var,
                        value=value,
                        err=e,
                    )
                    logger.info("Using default value: {default}", default=cfg[section][key])

    return cfg


def build_validator(cfg: dict[str, Any]) -> Validator:
    """Create a validator with the rules enabled in ``cfg``, in bundle order."""
    rules = cfg["rules"]
    validator = Validator()

    if rules["common_passwords"]:
        validator.add_rule(CommonPasswordRule())
    if rules["easy_spans"]:
        validator.add_rule(EasySpanRule(length=rules["span_length"]))
    if rules["internal_repetition"]:
        validator.add_rule(InternalRepetitionRule(length=rules["repetition_length"]))
    if rules["minimum_length"]:
        validator.add_rule(MinimumLengthRule(minimum=rules["min_length"]))

    return validator

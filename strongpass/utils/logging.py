"""Centralized logging configuration using Loguru.

Usage:
    from strongpass.utils.logging import logger
    logger.debug("Message")  # Only shows if STRONGPASS_LOG_LEVEL=DEBUG

Environment Variables:
    STRONGPASS_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    STRONGPASS_LOG_JSON: 0|1 (default: 0, human-readable)

Passwords are never passed to the logger.
"""

import json
import os
import sys

from loguru import logger

# Remove default handler
logger.remove()

_log_level = os.environ.get("STRONGPASS_LOG_LEVEL", "WARNING").upper()
_json_mode = os.environ.get("STRONGPASS_LOG_JSON", "0") == "1"


def ndjson_sink(message):
    """Write one JSON object per log record to stderr."""
    record = message.record

    entry = {
        "level": record["level"].name,
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "name": record["name"],
    }
    for key, value in record["extra"].items():
        entry[key] = value

    if record["exception"]:
        entry["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    # Never call logger.* inside a sink
    sys.stderr.write(json.dumps(entry, default=str) + "\n")
    sys.stderr.flush()


_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

if _json_mode:
    logger.add(ndjson_sink, level=_log_level, colorize=False)
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )


def set_log_level(level: str) -> None:
    """Replace the console handler with one at ``level``."""
    global _log_level

    _log_level = level.upper()
    logger.remove()
    if _json_mode:
        logger.add(ndjson_sink, level=_log_level, colorize=False)
    else:
        logger.add(sys.stderr, level=_log_level, format=_human_format, colorize=None)


__all__ = ["logger", "set_log_level"]

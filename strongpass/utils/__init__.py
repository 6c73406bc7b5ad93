"""strongpass utilities package."""

from .error_handler import CommandFailedError, handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger, set_log_level

__all__ = [
    "CommandFailedError",
    "handle_exceptions",
    "ExitCodes",
    "logger",
    "set_log_level",
]

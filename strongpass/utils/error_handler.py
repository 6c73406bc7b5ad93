"""Centralized error handler for strongpass commands."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from strongpass.utils.exit_codes import ExitCodes
from strongpass.utils.logging import logger


class CommandFailedError(click.ClickException):
    """A command that could not run, as opposed to a password that failed."""

    exit_code = ExitCodes.COMMAND_FAILED


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that logs unexpected failures and reports them through click."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except Exception as e:
            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=str(e),
            )
            raise CommandFailedError(f"{type(e).__name__}: {e}") from e

    return wrapper

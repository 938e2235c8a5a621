"""Centralized error handler for godepgraph commands."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from godepgraph.utils.exit_codes import ExitCodes
from godepgraph.utils.logging import logger


class GraphCommandError(click.ClickException):
    """ClickException carrying the godepgraph exit code."""

    exit_code = ExitCodes.RESOLUTION_FAILURE


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that logs command failures and turns them into click errors.

    Click's own exceptions (usage errors, aborts) pass through untouched so
    click can report them with its usual exit codes.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as e:
            error_msg = str(e)

            logger.opt(exception=True).debug(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=error_msg,
            )

            raise GraphCommandError(error_msg) from e

    return wrapper

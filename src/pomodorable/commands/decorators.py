"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomodorable.utils.logger import get_logger
from pomodorable.utils.ui.formatters import format_error


class AppError(Exception):
    """Application error carrying the exit code for the CLI."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable) -> Callable:
    """Log a command's duration and turn failures into clean CLI exits."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger("commands")
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
            return result

        except AppError as e:
            logger.error(
                "command failed: %s (%.3fs) - %s", cmd, time.monotonic() - start, e
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except Exception as e:
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                time.monotonic() - start,
                e,
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=1) from e

    return wrapper

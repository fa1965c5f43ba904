"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from shipit.core.result import Err, Result
from shipit.output.errors import print_release_error, release_error_exit_code
from shipit.services.release.errors import ReleaseError

if TYPE_CHECKING:
    from shipit.output.console import ConsoleProtocol


def exit_on_error[T](result: Result[T, ReleaseError], console: ConsoleProtocol) -> T:
    """Return the Ok value, or print the error and exit with its code."""
    if isinstance(result, Err):
        print_release_error(result.error, console)
        exit_with_code(release_error_exit_code(result.error))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)

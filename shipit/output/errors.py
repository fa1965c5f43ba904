"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shipit.core.errors import ErrorCode
from shipit.output.console import Style
from shipit.services.release.errors import ReleaseError

if TYPE_CHECKING:
    from shipit.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a fatal release error with its hint."""
    console.error(error.message)
    if error.hint:
        for line in error.hint.splitlines():
            console.print(f"hint: {line}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    """Get exit code for a release error."""
    match error.kind:
        case "invalid_release_type":
            return int(ErrorCode.USER_ERROR)
        case "tool_missing" | "not_a_repo" | "no_remote" | "invalid_tag":
            return int(ErrorCode.ENV_ERROR)
        case "git_failed" | "tag_failed" | "push_failed" | "release_failed" | "formula_failed":
            return int(ErrorCode.PUBLISH_ERROR)
        case "verify_failed":
            return int(ErrorCode.VERIFY_ERROR)

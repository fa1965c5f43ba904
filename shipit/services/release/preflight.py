"""Checks and read-only reporting done before anything is published."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from shipit.core.result import Err, Ok, Result
from shipit.output.console import ConsoleProtocol, Style
from shipit.platform.process import find_tool
from shipit.services.release.contracts import VersionControl
from shipit.services.release.errors import ReleaseError

REQUIRED_TOOLS: tuple[str, ...] = ("git", "gh")
RECENT_COMMITS = 5


def check_prerequisites(
    *,
    vcs: VersionControl,
    remote: str,
    which: Callable[[str], Path | None] = find_tool,
) -> Result[str, ReleaseError]:
    """Ensure git/gh exist, we are in a work tree and the remote is set.

    Returns:
        Ok(remote URL) on success
    """
    missing = [tool for tool in REQUIRED_TOOLS if which(tool) is None]
    if missing:
        return Err(
            ReleaseError(
                kind="tool_missing",
                message=f"Missing required tools: {' '.join(missing)}",
                hint="Install git and the GitHub CLI (https://cli.github.com/)",
            )
        )

    if not vcs.is_work_tree():
        return Err(ReleaseError(kind="not_a_repo", message="Not in a git repository"))

    url = vcs.remote_url(remote)
    if isinstance(url, Err) or not url.value:
        return Err(
            ReleaseError(
                kind="no_remote",
                message=f"No {remote} remote found",
                hint=f"git remote add {remote} <url>",
            )
        )
    return Ok(url.value)


def analyze_recent_changes(
    *,
    vcs: VersionControl,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    """Print recent commits, uncommitted changes and the last diff stat."""
    console.header("Analyzing Recent Changes")

    log = vcs.log_oneline(RECENT_COMMITS)
    if isinstance(log, Err):
        return Err(
            ReleaseError(
                kind="git_failed",
                message="failed to read git log",
                hint=log.error.message,
            )
        )
    console.info("Recent commits:")
    for line in log.value:
        console.print(f"  {line}")

    status = vcs.status()
    if isinstance(status, Ok) and not status.value.is_clean:
        console.warning("Working directory has uncommitted changes")
        for entry in status.value.entries:
            console.print(f"  {entry.short()}", Style.DIM)
        console.newline()

    if vcs.has_revision("HEAD~1"):
        stat = vcs.diff_stat("HEAD~1..HEAD")
        if isinstance(stat, Ok) and stat.value:
            console.info("Recent changes summary:")
            for line in stat.value.splitlines():
                console.print(f"  {line}", Style.DIM)

    return Ok(None)

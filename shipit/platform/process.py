"""Subprocess execution with Result-based error handling.

Every external tool shipit drives (git, gh) goes through ``run``. It blocks
until the command exits, captures its output and turns a non-zero exit or a
missing executable into a ``ProcessError`` value.

Usage:
    result = run(["git", "tag", "-l"], cwd=Path("."))
    match result:
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from shipit.core.result import Err, Ok, Result

__all__ = ["ProcessError", "find_tool", "run"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (-1 if it never started).
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        """Format error for display."""
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"

    @property
    def detail(self) -> str | None:
        """Most useful captured output for a hint, if any."""
        return self.stderr.strip() or self.stdout.strip() or None


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return stdout or error.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                stdout="",
                stderr=str(e),
            )
        )

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def find_tool(name: str) -> Path | None:
    """Locate an executable on PATH."""
    found = shutil.which(name)
    return Path(found) if found else None

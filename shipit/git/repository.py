"""Git repository abstraction.

This module provides the Repository class: every git operation a release
needs, each returning a Result.

Usage:
    repo = Repository(Path("/path/to/repo"))

    match repo.latest_tag():
        case None:
            print("no tags yet")
        case tag:
            print(f"last release: {tag}")

    match repo.create_tag("v1.2.0"):
        case Ok(_):
            print("tagged")
        case Err(e):
            print(f"tag failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from shipit.core.result import Err, Ok, Result
from shipit.platform.process import ProcessError
from shipit.platform.process import run as run_process

__all__ = [
    "GitError",
    "GitStatus",
    "Repository",
    "StatusEntry",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single entry in git status.

    Attributes:
        xy: Two-character status code (e.g., "M ", " M", "??")
        path: File path
    """

    xy: str
    path: str

    def short(self) -> str:
        """Render like ``git status --short``."""
        return f"{self.xy} {self.path}"


@dataclass(frozen=True, slots=True)
class GitStatus:
    """Working tree state from ``git status --porcelain=v1``."""

    entries: tuple[StatusEntry, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        """True if working tree has no changes."""
        return len(self.entries) == 0


class Repository:
    """Git repository abstraction.

    All methods that can fail return Result types. Methods that only answer
    a yes/no question (``is_work_tree``, ``has_revision``) return bool.

    Attributes:
        path: Path to the repository (any directory inside the work tree)
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def is_work_tree(self) -> bool:
        """Check if path is inside a git working copy."""
        return isinstance(self._run(["rev-parse", "--git-dir"]), Ok)

    def top_level(self) -> Result[Path, GitError]:
        """Absolute path of the work tree root."""
        result = self._run(["rev-parse", "--show-toplevel"])
        if isinstance(result, Err):
            return Err(self._error("rev-parse --show-toplevel", result.error))
        return Ok(Path(result.value.strip()))

    def status(self) -> Result[GitStatus, GitError]:
        """Get working tree status (``git status --porcelain=v1``)."""
        result = self._run(["status", "--porcelain=v1"])
        match result:
            case Err(e):
                return Err(self._error("status", e))
            case Ok(stdout):
                return Ok(self._parse_status(stdout))

    def latest_tag(self) -> str | None:
        """Most recent tag reachable from HEAD, or None if there is none."""
        result = self._run(["describe", "--tags", "--abbrev=0"])
        match result:
            case Ok(stdout):
                return stdout.strip() or None
            case Err(_):
                return None

    def list_tags(self) -> Result[list[str], GitError]:
        result = self._run(["tag", "-l"])
        if isinstance(result, Err):
            return Err(self._error("tag -l", result.error))
        return Ok([ln.strip() for ln in result.value.splitlines() if ln.strip()])

    def log_subjects(
        self,
        rev_range: str | None = None,
        *,
        limit: int | None = None,
    ) -> Result[list[str], GitError]:
        """Commit subjects, newest first.

        Args:
            rev_range: Revision range (e.g. ``v1.0.0..HEAD``); HEAD if None
            limit: Maximum number of commits
        """
        args = ["log", "--pretty=format:%s"]
        if limit is not None:
            args += ["-n", str(limit)]
        if rev_range is not None:
            args.append(rev_range)

        result = self._run(args)
        if isinstance(result, Err):
            return Err(self._error("log", result.error))
        return Ok(result.value.splitlines())

    def log_oneline(self, limit: int) -> Result[list[str], GitError]:
        """``git log --oneline -n <limit>`` lines."""
        result = self._run(["log", "--oneline", "-n", str(limit)])
        if isinstance(result, Err):
            return Err(self._error("log --oneline", result.error))
        return Ok([ln for ln in result.value.splitlines() if ln.strip()])

    def has_revision(self, rev: str) -> bool:
        """Check if a revision resolves to a commit."""
        result = self._run(["rev-parse", "--verify", "--quiet", f"{rev}^{{commit}}"])
        return isinstance(result, Ok)

    def diff_stat(self, rev_range: str) -> Result[str, GitError]:
        result = self._run(["diff", rev_range, "--stat"])
        if isinstance(result, Err):
            return Err(self._error("diff --stat", result.error))
        return Ok(result.value.rstrip())

    def remote_url(self, remote: str) -> Result[str, GitError]:
        result = self._run(["remote", "get-url", remote])
        if isinstance(result, Err):
            return Err(self._error(f"remote get-url {remote}", result.error))
        return Ok(result.value.strip())

    def create_tag(self, tag: str) -> Result[None, GitError]:
        """Create a lightweight tag on HEAD."""
        result = self._run(["tag", tag])
        if isinstance(result, Err):
            return Err(self._error(f"tag {tag}", result.error))
        return Ok(None)

    def push(self, remote: str, ref: str) -> Result[None, GitError]:
        result = self._run(["push", remote, ref])
        if isinstance(result, Err):
            return Err(self._error(f"push {remote} {ref}", result.error))
        return Ok(None)

    def add(self, paths: list[str]) -> Result[None, GitError]:
        result = self._run(["add", *paths])
        if isinstance(result, Err):
            return Err(self._error("add", result.error))
        return Ok(None)

    def commit(self, message: str) -> Result[None, GitError]:
        result = self._run(["commit", "-m", message])
        if isinstance(result, Err):
            return Err(self._error("commit", result.error))
        return Ok(None)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path)

    def _error(self, command: str, e: ProcessError) -> GitError:
        return GitError(
            command=command,
            message=e.detail or f"git {command} failed",
            returncode=e.returncode,
        )

    def _parse_status(self, output: str) -> GitStatus:
        """Parse git status --porcelain=v1 output."""
        entries: list[StatusEntry] = []
        for line in output.splitlines():
            entry = self._parse_entry(line)
            if entry:
                entries.append(entry)
        return GitStatus(entries=tuple(entries))

    def _parse_entry(self, line: str) -> StatusEntry | None:
        """Parse a single status entry line."""
        if len(line) < 4:
            return None

        # Format: XY path; untracked files are "?? path"
        if line.startswith("?? "):
            return StatusEntry(xy="??", path=line[3:])

        return StatusEntry(xy=line[:2], path=line[3:])

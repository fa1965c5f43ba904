"""Capabilities the release workflow needs from external systems.

``Repository`` (git) and ``GhCli`` (GitHub CLI) implement these; tests
substitute recording fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from shipit.core.result import Result
from shipit.git.repository import GitError, GitStatus
from shipit.services.release.errors import ReleaseError


@runtime_checkable
class VersionControl(Protocol):
    """Read history, tag the repository, push refs."""

    def is_work_tree(self) -> bool: ...

    def latest_tag(self) -> str | None: ...

    def list_tags(self) -> Result[list[str], GitError]: ...

    def log_subjects(
        self,
        rev_range: str | None = None,
        *,
        limit: int | None = None,
    ) -> Result[list[str], GitError]: ...

    def log_oneline(self, limit: int) -> Result[list[str], GitError]: ...

    def status(self) -> Result[GitStatus, GitError]: ...

    def has_revision(self, rev: str) -> bool: ...

    def diff_stat(self, rev_range: str) -> Result[str, GitError]: ...

    def remote_url(self, remote: str) -> Result[str, GitError]: ...

    def create_tag(self, tag: str) -> Result[None, GitError]: ...

    def push(self, remote: str, ref: str) -> Result[None, GitError]: ...


@runtime_checkable
class ReleaseHost(Protocol):
    """Create and query hosted releases."""

    def create_release(self, *, tag: str, title: str, notes: str) -> Result[str, ReleaseError]:
        """Create a release for an existing tag; returns its URL."""
        ...

    def release_exists(self, tag: str) -> bool: ...

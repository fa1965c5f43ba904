from __future__ import annotations

from pathlib import Path

from shipit.core.result import Err, Ok, Result
from shipit.platform.process import run as run_process
from shipit.services.release.errors import ReleaseError


class GhCli:
    """Hosted releases through the GitHub CLI (``gh``).

    Commands run inside ``repo_root`` so gh resolves the repository from
    its git remotes.
    """

    def __init__(self, *, repo_root: Path) -> None:
        self._repo_root = repo_root

    def create_release(self, *, tag: str, title: str, notes: str) -> Result[str, ReleaseError]:
        result = run_process(
            ["gh", "release", "create", tag, "--title", title, "--notes", notes],
            cwd=self._repo_root,
        )
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="release_failed",
                    message=f"failed to create GitHub release: {tag}",
                    hint=result.error.detail,
                )
            )

        # gh prints the release URL as its last line.
        lines = [ln.strip() for ln in result.value.splitlines() if ln.strip()]
        return Ok(lines[-1] if lines else "")

    def release_exists(self, tag: str) -> bool:
        result = run_process(["gh", "release", "view", tag], cwd=self._repo_root)
        return isinstance(result, Ok)

from __future__ import annotations

from shipit.core.result import Err, Ok, Result
from shipit.output.console import ConsoleProtocol
from shipit.services.release.contracts import ReleaseHost, VersionControl
from shipit.services.release.errors import ReleaseError


def verify_release(
    *,
    vcs: VersionControl,
    host: ReleaseHost,
    tag: str,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    """Confirm the tag and the hosted release both exist.

    Nothing is rolled back on failure: a tag without a release stays in place.
    """
    tags = vcs.list_tags()
    if isinstance(tags, Err):
        return Err(
            ReleaseError(
                kind="verify_failed",
                message="failed to list git tags",
                hint=tags.error.message,
            )
        )

    if tag not in tags.value:
        return Err(ReleaseError(kind="verify_failed", message=f"Git tag not found: {tag}"))
    console.success(f"Git tag created: {tag}")

    if not host.release_exists(tag):
        return Err(
            ReleaseError(
                kind="verify_failed",
                message=f"GitHub release not found: {tag}",
                hint=f"The tag {tag} was left in place; run `gh release create {tag}` manually.",
            )
        )
    console.success(f"GitHub release created: {tag}")

    console.success("Release verification complete!")
    return Ok(None)

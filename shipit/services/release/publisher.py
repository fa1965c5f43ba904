from __future__ import annotations

from shipit.core.result import Err, Ok, Result
from shipit.output.console import ConsoleProtocol, Style
from shipit.services.release.contracts import ReleaseHost, VersionControl
from shipit.services.release.errors import ReleaseError


def create_tag(
    *,
    vcs: VersionControl,
    tag: str,
    console: ConsoleProtocol,
    dry_run: bool,
) -> Result[None, ReleaseError]:
    console.print(f"git tag {tag}", Style.DIM)
    if dry_run:
        return Ok(None)

    result = vcs.create_tag(tag)
    if isinstance(result, Err):
        return Err(
            ReleaseError(
                kind="tag_failed",
                message=f"failed to create tag: {tag}",
                hint=result.error.message,
            )
        )

    console.success(f"Created tag: {tag}")
    return Ok(None)


def push_tag(
    *,
    vcs: VersionControl,
    remote: str,
    tag: str,
    console: ConsoleProtocol,
    dry_run: bool,
) -> Result[None, ReleaseError]:
    console.print(f"git push {remote} {tag}", Style.DIM)
    if dry_run:
        return Ok(None)

    result = vcs.push(remote, tag)
    if isinstance(result, Err):
        return Err(
            ReleaseError(
                kind="push_failed",
                message=f"failed to push tag {tag} to {remote}",
                hint=result.error.message,
            )
        )

    console.success(f"Pushed tag to {remote}")
    return Ok(None)


def create_hosted_release(
    *,
    host: ReleaseHost,
    tag: str,
    title: str,
    notes: str,
    console: ConsoleProtocol,
    dry_run: bool,
) -> Result[str, ReleaseError]:
    """Create the GitHub release for an already pushed tag; returns its URL."""
    console.print(f'gh release create {tag} --title "{title}" --notes <...>', Style.DIM)
    if dry_run:
        return Ok(f"(dry-run) release {tag}")

    result = host.create_release(tag=tag, title=title, notes=notes)
    if isinstance(result, Err):
        return result

    console.success(f"Created GitHub release: {result.value}")
    return result

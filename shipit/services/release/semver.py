from __future__ import annotations

import re
from dataclasses import dataclass

from shipit.core.result import Err, Ok, Result
from shipit.services.release.contracts import VersionControl
from shipit.services.release.errors import ReleaseError


# Explicit versions given on the command line: "1.2.3" or "v1.2.3".
_EXPLICIT_RE = re.compile(r"^v?\d+\.\d+\.\d+$")
# Existing tags: missing minor/patch components default to 0.
_TAG_RE = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?$")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise ValueError(f"negative version component: {self.major}.{self.minor}.{self.patch}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_tag(self) -> str:
        return f"v{self}"


ZERO = SemVer(0, 0, 0)


def parse_version(text: str) -> SemVer | None:
    """Parse ``v1.2.3`` / ``1.2.3`` / ``v1.2`` / ``v1``; None if it is not a version."""
    m = _TAG_RE.match(text.strip())
    if m is None:
        return None
    major, minor, patch = (int(g) if g is not None else 0 for g in m.groups())
    return SemVer(major, minor, patch)


def is_explicit_version(release_arg: str) -> bool:
    return _EXPLICIT_RE.match(release_arg) is not None


def increment(current: SemVer, release_type: str) -> Result[SemVer, ReleaseError]:
    match release_type:
        case "major":
            return Ok(SemVer(current.major + 1, 0, 0))
        case "minor":
            return Ok(SemVer(current.major, current.minor + 1, 0))
        case "patch":
            return Ok(SemVer(current.major, current.minor, current.patch + 1))
        case _:
            return Err(
                ReleaseError(
                    kind="invalid_release_type",
                    message=f"invalid release type: {release_type}",
                    hint="Use patch, minor, major or an explicit version like v1.2.3",
                )
            )


def resolve_next_version(current: SemVer, release_arg: str) -> Result[SemVer, ReleaseError]:
    """Next version for a release argument.

    An explicit version literal is taken as-is and never incremented; any
    other argument must be a bump kind.
    """
    if is_explicit_version(release_arg):
        explicit = parse_version(release_arg)
        # Always parses: the explicit pattern is stricter than the tag pattern.
        assert explicit is not None
        return Ok(explicit)
    return increment(current, release_arg)


def version_from_tag(tag: str | None) -> Result[SemVer, ReleaseError]:
    """Current version given the most recent tag (``0.0.0`` when there is none)."""
    if tag is None:
        return Ok(ZERO)

    parsed = parse_version(tag)
    if parsed is None:
        return Err(
            ReleaseError(
                kind="invalid_tag",
                message=f"latest tag is not a version: {tag}",
                hint="Pass an explicit version, e.g. `release v1.0.0`",
            )
        )
    return Ok(parsed)


def current_version(
    vcs: VersionControl,
    *,
    release_arg: str | None = None,
) -> Result[SemVer, ReleaseError]:
    """Version of the most recent tag (``0.0.0`` when there is none).

    For an explicit version literal the current version is only reported,
    never incremented, so a tag that is not a version counts as ``0.0.0``
    instead of failing with ``invalid_tag``.
    """
    tag = vcs.latest_tag()
    if release_arg is not None and is_explicit_version(release_arg):
        parsed = parse_version(tag) if tag is not None else None
        return Ok(parsed or ZERO)
    return version_from_tag(tag)

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "tool_missing",
    "not_a_repo",
    "no_remote",
    "invalid_release_type",
    "invalid_tag",
    "git_failed",
    "tag_failed",
    "push_failed",
    "release_failed",
    "formula_failed",
    "verify_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

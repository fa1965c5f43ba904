from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from shipit.services.release.semver import SemVer

FormulaStatus = Literal["updated", "skipped"]


@dataclass(frozen=True, slots=True)
class ReleasePlan:
    """Everything decided before the first mutating step."""

    release_type: str  # a bump kind or an explicit version literal
    previous_tag: str | None
    current: SemVer
    version: SemVer
    title: str
    notes: str

    @property
    def tag(self) -> str:
        return self.version.to_tag()


@dataclass(frozen=True, slots=True)
class FormulaOutcome:
    status: FormulaStatus
    reason: str
    github_user: str | None = None
    formula: str | None = None

    @property
    def brew_install(self) -> str | None:
        if self.github_user is None or self.formula is None:
            return None
        return f"brew install {self.github_user}/tap/{self.formula}"


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    plan: ReleasePlan
    release_url: str
    formula: FormulaOutcome

"""Commit subject classification.

Subjects are matched against an ordered rule table; the first rule with a
keyword contained in the lower-cased subject wins, anything else is Other.
Matching is plain substring search, so "fixture" counts as a fix and
"address" as a feature. That imprecision is accepted behavior.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from shipit.core.result import Err
from shipit.services.release.contracts import VersionControl

INITIAL_RELEASE_ENTRY = "Initial release"


class CommitCategory(Enum):
    FEATURE = "Feature"
    IMPROVEMENT = "Improvement"
    FIX = "Fix"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


# Order in which sections appear in release notes.
CATEGORY_ORDER: tuple[CommitCategory, ...] = (
    CommitCategory.FEATURE,
    CommitCategory.IMPROVEMENT,
    CommitCategory.FIX,
    CommitCategory.OTHER,
)


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    category: CommitCategory
    keywords: tuple[str, ...]

    def matches(self, lowered: str) -> bool:
        return any(k in lowered for k in self.keywords)


# Evaluation order (not display order): Fix is tested before Improvement.
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(CommitCategory.FEATURE, ("feat", "feature", "add", "new")),
    ClassificationRule(CommitCategory.FIX, ("fix", "bug", "patch", "resolve")),
    ClassificationRule(
        CommitCategory.IMPROVEMENT,
        ("improve", "enhance", "update", "optimize", "refactor"),
    ),
)


def classify_subject(subject: str) -> CommitCategory:
    lowered = subject.lower()
    for rule in CLASSIFICATION_RULES:
        if rule.matches(lowered):
            return rule.category
    return CommitCategory.OTHER


def classify(commits: Iterable[str]) -> dict[CommitCategory, list[str]]:
    """Bucket commit subjects by category.

    Every category is present in the result (possibly empty), keyed in
    ``CATEGORY_ORDER``; entries keep their input order.
    """
    buckets: dict[CommitCategory, list[str]] = {c: [] for c in CATEGORY_ORDER}
    for subject in commits:
        buckets[classify_subject(subject)].append(subject)
    return buckets


def commit_range(previous_tag: str | None) -> str | None:
    """Revision range since the previous release (None means "from HEAD")."""
    if previous_tag is None:
        return None
    return f"{previous_tag}..HEAD"


def read_commits(
    vcs: VersionControl,
    *,
    previous_tag: str | None,
    fallback_limit: int,
) -> list[str]:
    """Commit subjects to summarize, newest first.

    Commits after ``previous_tag``; without a previous tag, the
    ``fallback_limit`` most recent ones. An unreadable log yields a single
    "Initial release" entry.
    """
    rev_range = commit_range(previous_tag)
    limit = fallback_limit if rev_range is None else None
    result = vcs.log_subjects(rev_range, limit=limit)
    if isinstance(result, Err):
        return [INITIAL_RELEASE_ENTRY]
    return [s.strip() for s in result.value if s.strip()]

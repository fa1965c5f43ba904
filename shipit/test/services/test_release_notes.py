from __future__ import annotations

import pytest

from shipit.services.release.classify import CommitCategory, classify
from shipit.services.release.notes import (
    INSTALLATION_NOTE,
    SECTION_HEADINGS,
    compose,
    extract_title,
    release_title,
    repo_web_url,
)
from shipit.services.release.semver import SemVer

REPO = "https://github.com/acme/widget"


@pytest.mark.parametrize(
    ("release_type", "expected"),
    [
        ("major", "Major Release v2.0.0"),
        ("minor", "New Features & Improvements v2.0.0"),
        ("patch", "Bug Fixes & Improvements v2.0.0"),
        ("v2.0.0", "Release v2.0.0"),
    ],
)
def test_release_title(release_type: str, expected: str) -> None:
    assert release_title(release_type, SemVer(2, 0, 0)) == expected


def test_repo_web_url_strips_git_suffix() -> None:
    assert repo_web_url("https://github.com/acme/widget.git\n") == REPO
    assert repo_web_url(REPO) == REPO
    assert repo_web_url("git@github.com:acme/widget.git") == "git@github.com:acme/widget"


def test_compose_renders_full_document() -> None:
    notes = compose(
        version=SemVer(1, 3, 0),
        release_type="minor",
        categorized=classify(["feat: add export", "fix: crash on save", "chore: tidy"]),
        repo_url=REPO,
        previous="1.2.0",
    )

    assert notes.render() == "\n".join(
        [
            "# New Features & Improvements v1.3.0",
            "",
            "## 🚀 New Features",
            "- feat: add export",
            "",
            "## 🐛 Bug Fixes",
            "- fix: crash on save",
            "",
            "## 📝 Other Changes",
            "- chore: tidy",
            "",
            "---",
            "",
            INSTALLATION_NOTE,
            "",
            f"**Full Changelog**: {REPO}/compare/1.2.0...v1.3.0",
        ]
    )


def test_compose_omits_empty_sections_and_keeps_order() -> None:
    categorized = {
        CommitCategory.OTHER: ["chore: x"],
        CommitCategory.FIX: [],
        CommitCategory.IMPROVEMENT: ["refactor y"],
        CommitCategory.FEATURE: ["feat: z"],
    }
    notes = compose(
        version=SemVer(1, 0, 1),
        release_type="patch",
        categorized=categorized,
        repo_url=REPO,
        previous="1.0.0",
    )

    assert [s.category for s in notes.sections] == [
        CommitCategory.FEATURE,
        CommitCategory.IMPROVEMENT,
        CommitCategory.OTHER,
    ]
    text = notes.render()
    assert SECTION_HEADINGS[CommitCategory.FIX] not in text
    assert text.index("🚀") < text.index("💡") < text.index("📝")


def test_compose_with_no_commits_has_only_title_and_footer() -> None:
    notes = compose(
        version=SemVer(0, 0, 1),
        release_type="patch",
        categorized=classify([]),
        repo_url=REPO,
        previous="0.0.0",
    )
    assert notes.sections == ()
    assert notes.render().startswith("# Bug Fixes & Improvements v0.0.1\n\n---\n")


@pytest.mark.parametrize("release_type", ["major", "minor", "patch", "v3.1.4"])
def test_title_round_trips_through_rendered_notes(release_type: str) -> None:
    notes = compose(
        version=SemVer(3, 1, 4),
        release_type=release_type,
        categorized=classify(["feat: a"]),
        repo_url=REPO,
        previous="3.1.3",
    )
    assert extract_title(notes.render()) == notes.title


def test_extract_title_from_custom_message() -> None:
    assert extract_title("Hotfix for login\n\nDetails here") == "Hotfix for login"
    assert extract_title("# Spring release\nbody") == "Spring release"
    assert extract_title("## Not stripped") == "## Not stripped"
    assert extract_title("") == ""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from shipit.services.release.classify import CATEGORY_ORDER, CommitCategory
from shipit.services.release.semver import SemVer


SECTION_HEADINGS: dict[CommitCategory, str] = {
    CommitCategory.FEATURE: "## 🚀 New Features",
    CommitCategory.IMPROVEMENT: "## 💡 Improvements",
    CommitCategory.FIX: "## 🐛 Bug Fixes",
    CommitCategory.OTHER: "## 📝 Other Changes",
}

INSTALLATION_NOTE = "**Installation**: See repository README for installation instructions."


@dataclass(frozen=True, slots=True)
class NotesSection:
    category: CommitCategory
    entries: tuple[str, ...]

    @property
    def heading(self) -> str:
        return SECTION_HEADINGS[self.category]


@dataclass(frozen=True, slots=True)
class ReleaseNotes:
    title: str
    sections: tuple[NotesSection, ...]
    compare_url: str

    def render(self) -> str:
        lines: list[str] = [f"# {self.title}", ""]

        for section in self.sections:
            lines.append(section.heading)
            lines.extend(f"- {entry}" for entry in section.entries)
            lines.append("")

        lines.append("---")
        lines.append("")
        lines.append(INSTALLATION_NOTE)
        lines.append("")
        lines.append(f"**Full Changelog**: {self.compare_url}")
        return "\n".join(lines)


def release_title(release_type: str, version: SemVer) -> str:
    match release_type:
        case "major":
            return f"Major Release {version.to_tag()}"
        case "minor":
            return f"New Features & Improvements {version.to_tag()}"
        case "patch":
            return f"Bug Fixes & Improvements {version.to_tag()}"
        case _:
            return f"Release {version.to_tag()}"


def repo_web_url(remote_url: str) -> str:
    """Origin remote URL without its trailing ``.git``."""
    url = remote_url.strip()
    return url[: -len(".git")] if url.endswith(".git") else url


def compare_url(repo_url: str, previous: str, version: SemVer) -> str:
    return f"{repo_url}/compare/{previous}...{version.to_tag()}"


def compose(
    *,
    version: SemVer,
    release_type: str,
    categorized: Mapping[CommitCategory, Sequence[str]],
    repo_url: str,
    previous: str,
) -> ReleaseNotes:
    """Build release notes from classified commits.

    Args:
        version: The version being released
        release_type: Bump kind or explicit version literal (selects the title)
        categorized: Output of ``classify``
        repo_url: Web URL of the repository (see ``repo_web_url``)
        previous: Version the changelog link compares against, without a
            leading ``v`` (``1.2.0``)
    """
    sections = tuple(
        NotesSection(category=c, entries=tuple(categorized[c]))
        for c in CATEGORY_ORDER
        if categorized.get(c)
    )
    return ReleaseNotes(
        title=release_title(release_type, version),
        sections=sections,
        compare_url=compare_url(repo_url, previous, version),
    )


def extract_title(notes: str) -> str:
    """Release title from notes text: first line, leading ``# `` removed."""
    lines = notes.splitlines()
    first = lines[0] if lines else ""
    return first.removeprefix("# ")

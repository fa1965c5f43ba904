"""Homebrew tap update after a release.

Everything here is optional: a missing tap, a missing formula or a failed
tarball download only skips the update. Once the formula file has been
rewritten, failing to commit or push it in the tap is an error.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from shipit.core.config import HomebrewConfig
from shipit.core.result import Err, Ok, Result
from shipit.git.repository import GitError, Repository
from shipit.output.console import ConsoleProtocol, Style
from shipit.services.release.errors import ReleaseError
from shipit.services.release.model import FormulaOutcome
from shipit.services.release.semver import SemVer
from shipit.tools.checksum import sha256_file
from shipit.tools.http import HttpClient


_GITHUB_USER_RE = re.compile(r"github\.com[:/]([^/]+)/")
_ARCHIVE_RE = re.compile(r"archive/v\d+\.\d+\.\d+\.tar\.gz")
_SHA256_RE = re.compile(r'sha256 "[^"]*"')


class TapRepository(Protocol):
    def add(self, paths: list[str]) -> Result[None, GitError]: ...

    def commit(self, message: str) -> Result[None, GitError]: ...

    def push(self, remote: str, ref: str) -> Result[None, GitError]: ...


@dataclass(frozen=True, slots=True)
class FormulaRewrite:
    text: str
    urls_replaced: int
    checksums_replaced: int


def github_user_from_remote(remote_url: str) -> str | None:
    m = _GITHUB_USER_RE.search(remote_url)
    return m.group(1) if m else None


def tarball_url(*, github_user: str, formula: str, version: SemVer) -> str:
    return f"https://github.com/{github_user}/{formula}/archive/{version.to_tag()}.tar.gz"


def rewrite_formula(text: str, *, version: SemVer, sha256: str) -> FormulaRewrite:
    """Point the formula at the new archive and checksum."""
    text, urls = _ARCHIVE_RE.subn(f"archive/{version.to_tag()}.tar.gz", text)
    text, sums = _SHA256_RE.subn(f'sha256 "{sha256}"', text)
    return FormulaRewrite(text=text, urls_replaced=urls, checksums_replaced=sums)


def _skipped(reason: str, console: ConsoleProtocol, **extra: str | None) -> Ok[FormulaOutcome]:
    console.info(reason)
    return Ok(FormulaOutcome(status="skipped", reason=reason, **extra))


def update_formula(
    *,
    homebrew: HomebrewConfig,
    remote_url: str,
    version: SemVer,
    http: HttpClient,
    console: ConsoleProtocol,
    dry_run: bool,
    temp_dir: Path | None = None,
    open_repo: Callable[[Path], TapRepository] = Repository,
) -> Result[FormulaOutcome, ReleaseError]:
    github_user = github_user_from_remote(remote_url)
    if github_user is None:
        return _skipped("Could not detect GitHub username, skipping Homebrew update", console)

    found = {"github_user": github_user, "formula": homebrew.formula}
    if not homebrew.tap_dir.is_dir():
        return _skipped(f"No Homebrew tap directory found at {homebrew.tap_dir}", console, **found)

    formula_path = homebrew.formula_path
    if not formula_path.is_file():
        return _skipped(f"No Homebrew formula found at {formula_path}", console, **found)

    console.info(f"Updating Homebrew formula: {formula_path}")
    url = tarball_url(github_user=github_user, formula=homebrew.formula, version=version)
    if dry_run:
        console.print(f"download {url}", Style.DIM)
        return _skipped("dry run: formula left unchanged", console, **found)

    tarball = (temp_dir or Path(tempfile.gettempdir())) / f"{homebrew.formula}-{version.to_tag()}.tar.gz"
    try:
        downloaded = http.download(url, tarball)
        if isinstance(downloaded, Err):
            console.warning(f"Could not download tarball for Homebrew update: {downloaded.error}")
            return Ok(
                FormulaOutcome(status="skipped", reason="tarball download failed", **found)
            )

        rewrite = rewrite_formula(
            formula_path.read_text(encoding="utf-8"),
            version=version,
            sha256=sha256_file(tarball),
        )
        if rewrite.urls_replaced == 0:
            console.warning(f"no archive URL matched in {formula_path}")
        if rewrite.checksums_replaced == 0:
            console.warning(f"no sha256 field matched in {formula_path}")
        formula_path.write_text(rewrite.text, encoding="utf-8")
    except OSError as e:
        return Err(
            ReleaseError(
                kind="formula_failed",
                message=f"failed to update formula: {e}",
                hint=str(formula_path),
            )
        )
    finally:
        tarball.unlink(missing_ok=True)

    committed = _commit_and_push(
        repo=open_repo(homebrew.tap_dir),
        homebrew=homebrew,
        version=version,
        console=console,
    )
    if isinstance(committed, Err):
        return committed

    console.success(f"Updated Homebrew formula to {version.to_tag()}")
    return Ok(FormulaOutcome(status="updated", reason=str(formula_path), **found))


def _commit_and_push(
    *,
    repo: TapRepository,
    homebrew: HomebrewConfig,
    version: SemVer,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    message = f"Update {homebrew.formula} to {version.to_tag()}"
    steps: tuple[tuple[str, Callable[[], Result[None, GitError]]], ...] = (
        (f"git add {homebrew.formula_rel_path}", lambda: repo.add([homebrew.formula_rel_path])),
        (f'git commit -m "{message}"', lambda: repo.commit(message)),
        (f"git push origin {homebrew.branch}", lambda: repo.push("origin", homebrew.branch)),
    )
    for label, step in steps:
        console.print(label, Style.DIM)
        result = step()
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="formula_failed",
                    message=f"tap update failed: {label}",
                    hint=result.error.message,
                )
            )
    return Ok(None)

"""End-to-end release: preflight, plan, publish, tap update, verify.

Steps run strictly in sequence and the first fatal error stops the run.
Nothing already published is undone: a hosted-release failure after the tag
was pushed leaves that tag on the remote.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from shipit.core.config import ReleaseConfig
from shipit.core.result import Err, Ok, Result
from shipit.git.repository import Repository
from shipit.output.console import ConsoleProtocol
from shipit.platform.process import find_tool
from shipit.services.release.classify import classify, read_commits
from shipit.services.release.contracts import ReleaseHost, VersionControl
from shipit.services.release.errors import ReleaseError
from shipit.services.release.formula import TapRepository, update_formula
from shipit.services.release.model import ReleaseOutcome, ReleasePlan
from shipit.services.release.notes import compose, extract_title, repo_web_url
from shipit.services.release.preflight import analyze_recent_changes, check_prerequisites
from shipit.services.release.publisher import create_hosted_release, create_tag, push_tag
from shipit.services.release.semver import current_version, resolve_next_version
from shipit.services.release.verify import verify_release
from shipit.tools.http import HttpClient


class ReleaseService:
    def __init__(
        self,
        *,
        config: ReleaseConfig,
        vcs: VersionControl,
        host: ReleaseHost,
        http: HttpClient,
        console: ConsoleProtocol,
        which: Callable[[str], Path | None] = find_tool,
        open_tap_repo: Callable[[Path], TapRepository] = Repository,
    ) -> None:
        self._config = config
        self._vcs = vcs
        self._host = host
        self._http = http
        self._console = console
        self._which = which
        self._open_tap_repo = open_tap_repo

    def run(
        self,
        *,
        release_arg: str,
        custom_message: str | None = None,
    ) -> Result[ReleaseOutcome, ReleaseError]:
        remote_url = check_prerequisites(
            vcs=self._vcs, remote=self._config.remote, which=self._which
        )
        if isinstance(remote_url, Err):
            return remote_url

        analyzed = analyze_recent_changes(vcs=self._vcs, console=self._console)
        if isinstance(analyzed, Err):
            return analyzed

        plan = self.plan(
            release_arg=release_arg,
            custom_message=custom_message,
            remote_url=remote_url.value,
        )
        if isinstance(plan, Err):
            return plan
        return self.publish(plan.value, remote_url=remote_url.value)

    def plan(
        self,
        *,
        release_arg: str,
        custom_message: str | None,
        remote_url: str,
    ) -> Result[ReleasePlan, ReleaseError]:
        """Resolve the version and produce title and notes. Nothing is written."""
        previous_tag = self._vcs.latest_tag()
        current = current_version(self._vcs, release_arg=release_arg)
        if isinstance(current, Err):
            return current

        version = resolve_next_version(current.value, release_arg)
        if isinstance(version, Err):
            return version

        self._console.info(f"Current version: {current.value.to_tag()}")
        self._console.info(f"New version: {version.value.to_tag()}")

        if custom_message:
            notes = custom_message
        else:
            self._console.info("Generating release notes from recent commits...")
            commits = read_commits(
                self._vcs,
                previous_tag=previous_tag,
                fallback_limit=self._config.fallback_commits,
            )
            notes = compose(
                version=version.value,
                release_type=release_arg,
                categorized=classify(commits),
                repo_url=repo_web_url(remote_url),
                previous=str(current.value),
            ).render()

        title = extract_title(notes)
        self._console.info(f"Release title: {title}")

        return Ok(
            ReleasePlan(
                release_type=release_arg,
                previous_tag=previous_tag,
                current=current.value,
                version=version.value,
                title=title,
                notes=notes,
            )
        )

    def publish(
        self,
        plan: ReleasePlan,
        *,
        remote_url: str,
    ) -> Result[ReleaseOutcome, ReleaseError]:
        """Tag, push, create the hosted release, update the tap, verify."""
        console = self._console
        dry_run = self._config.dry_run

        console.header("Creating Git Tag")
        ok = create_tag(vcs=self._vcs, tag=plan.tag, console=console, dry_run=dry_run)
        if isinstance(ok, Err):
            return ok
        ok = push_tag(
            vcs=self._vcs,
            remote=self._config.remote,
            tag=plan.tag,
            console=console,
            dry_run=dry_run,
        )
        if isinstance(ok, Err):
            return ok

        console.header("Creating GitHub Release")
        url = create_hosted_release(
            host=self._host,
            tag=plan.tag,
            title=plan.title,
            notes=plan.notes,
            console=console,
            dry_run=dry_run,
        )
        if isinstance(url, Err):
            return url

        console.header("Checking for Homebrew Tap")
        formula = update_formula(
            homebrew=self._config.homebrew,
            remote_url=remote_url,
            version=plan.version,
            http=self._http,
            console=console,
            dry_run=dry_run,
            open_repo=self._open_tap_repo,
        )
        if isinstance(formula, Err):
            return formula

        console.header("Verifying Release")
        if dry_run:
            console.info("dry run: verification skipped")
        else:
            verified = verify_release(
                vcs=self._vcs, host=self._host, tag=plan.tag, console=console
            )
            if isinstance(verified, Err):
                return verified

        return Ok(ReleaseOutcome(plan=plan, release_url=url.value, formula=formula.value))

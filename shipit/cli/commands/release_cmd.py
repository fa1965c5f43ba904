from __future__ import annotations

from pathlib import Path

import typer

from shipit import __version__
from shipit.cli.commands._helpers import exit_on_error, exit_with_code
from shipit.cli.context import CLIContext, build_context
from shipit.core.config import DEFAULT_SCRIPT_NAME
from shipit.core.errors import ErrorCode
from shipit.git.repository import Repository
from shipit.output.console import ConsoleProtocol, Style
from shipit.platform.process import find_tool
from shipit.services.release.gh import GhCli
from shipit.services.release.model import ReleaseOutcome
from shipit.services.release.service import ReleaseService
from shipit.tools.http import RealHttpClient


def usage(script_name: str) -> str:
    return "\n".join(
        [
            f"Usage: {script_name} <patch|minor|major|vX.Y.Z> [custom_message]",
            "",
            "Examples:",
            f"  {script_name} patch                     # Auto-detect patch release",
            f"  {script_name} minor                     # Auto-detect minor release",
            f"  {script_name} major                     # Auto-detect major release",
            f'  {script_name} v1.2.3 "Custom message"  # Specific version',
        ]
    )


def release(
    release_type: str | None = typer.Argument(
        None,
        metavar="RELEASE_TYPE",
        help="patch, minor, major or an explicit version (v1.2.3)",
    ),
    message: str | None = typer.Argument(
        None,
        metavar="[CUSTOM_MESSAGE]",
        help="Release notes to use verbatim (first line becomes the title)",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print commands, do not publish."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: <project>/shipit.toml if present)",
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Tag, publish and verify a release from recent commits."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if not release_type:
        typer.echo(usage(DEFAULT_SCRIPT_NAME))
        exit_with_code(int(ErrorCode.USER_ERROR))

    ctx = build_context(config_path=config, dry_run=dry_run)

    ctx.console.banner("Release Automation", "Automated Release Process")

    outcome = exit_on_error(
        _service(ctx).run(release_arg=release_type, custom_message=message),
        ctx.console,
    )
    print_summary(outcome, ctx.console, brew_available=find_tool("brew") is not None)


def _service(ctx: CLIContext) -> ReleaseService:
    return ReleaseService(
        config=ctx.config,
        vcs=Repository(ctx.project_root),
        host=GhCli(repo_root=ctx.project_root),
        http=RealHttpClient(),
        console=ctx.console,
    )


def print_summary(outcome: ReleaseOutcome, console: ConsoleProtocol, *, brew_available: bool) -> None:
    console.newline()
    console.print("🎉 Release Complete!", Style.SUCCESS)
    console.print(f"Version: {outcome.plan.tag}", Style.SUCCESS)
    console.print(f"GitHub Release: {outcome.release_url}", Style.SUCCESS)

    install = outcome.formula.brew_install
    if brew_available and install is not None:
        console.print(f"Homebrew Install: {install}", Style.INFO)

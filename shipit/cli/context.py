from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from shipit.core.config import ReleaseConfig, load_release_config
from shipit.core.errors import ErrorCode
from shipit.core.result import Ok
from shipit.git.repository import Repository
from shipit.output.console import ConsoleProtocol, RichConsole
from shipit.platform.paths import home


@dataclass(frozen=True, slots=True)
class CLIContext:
    project_root: Path
    config: ReleaseConfig
    console: ConsoleProtocol


def detect_project_root(cwd: Path | None = None) -> Path:
    """Top level of the enclosing git work tree, or cwd outside of one."""
    start = (cwd or Path.cwd()).resolve()
    top = Repository(start).top_level()
    if isinstance(top, Ok):
        return top.value
    return start


def build_context(*, config_path: Path | None = None, dry_run: bool = False) -> CLIContext:
    project_root = detect_project_root()
    console = RichConsole()

    config_result = load_release_config(project_root=project_root, home=home(), path=config_path)
    if not isinstance(config_result, Ok):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        project_root=project_root,
        config=config_result.value.with_dry_run(dry_run),
        console=console,
    )

"""Typed release configuration.

The configuration is built once at startup and never mutated afterwards.
Defaults cover the common case; a ``shipit.toml`` file at the project root
can override them:

    [release]
    remote = "origin"
    fallback_commits = 5

    [homebrew]
    tap_dir = "~/homebrew-tap"
    branch = "main"
    formula = "myproject"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "HomebrewConfig",
    "ReleaseConfig",
    "load_release_config",
]

CONFIG_FILE_NAME = "shipit.toml"

DEFAULT_SCRIPT_NAME = "release"
DEFAULT_REMOTE = "origin"
DEFAULT_FALLBACK_COMMITS = 5
DEFAULT_TAP_DIR_NAME = "homebrew-tap"
DEFAULT_TAP_BRANCH = "main"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the config file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class HomebrewConfig:
    """Where the optional Homebrew tap lives and what to update in it.

    Attributes:
        tap_dir: Local clone of the tap repository
        branch: Branch pushed after the formula commit
        formula: Formula name (``Formula/<formula>.rb``)
    """

    tap_dir: Path
    branch: str
    formula: str

    @property
    def formula_rel_path(self) -> str:
        return f"Formula/{self.formula}.rb"

    @property
    def formula_path(self) -> Path:
        return self.tap_dir / self.formula_rel_path


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Process-wide settings for one release run."""

    project_root: Path
    homebrew: HomebrewConfig
    remote: str = DEFAULT_REMOTE
    fallback_commits: int = DEFAULT_FALLBACK_COMMITS
    dry_run: bool = False

    @classmethod
    def defaults(cls, *, project_root: Path, home: Path) -> ReleaseConfig:
        return cls(
            project_root=project_root,
            homebrew=HomebrewConfig(
                tap_dir=home / DEFAULT_TAP_DIR_NAME,
                branch=DEFAULT_TAP_BRANCH,
                formula=project_root.name,
            ),
        )

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, object],
        *,
        project_root: Path,
        home: Path,
    ) -> ReleaseConfig:
        """Create a config from a mapping (parsed TOML)."""
        base = cls.defaults(project_root=project_root, home=home)
        release: StrDict = get_table(data, "release") or {}
        homebrew: StrDict = get_table(data, "homebrew") or {}

        fallback = get_int(release, "fallback_commits")
        if fallback is not None and fallback < 1:
            raise ValueError(f"release.fallback_commits must be >= 1, got {fallback}")

        tap_dir = get_str(homebrew, "tap_dir")
        return cls(
            project_root=project_root,
            homebrew=HomebrewConfig(
                tap_dir=_expand_home(tap_dir, home) if tap_dir else base.homebrew.tap_dir,
                branch=get_str(homebrew, "branch") or base.homebrew.branch,
                formula=get_str(homebrew, "formula") or base.homebrew.formula,
            ),
            remote=get_str(release, "remote") or base.remote,
            fallback_commits=fallback or base.fallback_commits,
        )

    def with_dry_run(self, dry_run: bool) -> ReleaseConfig:
        return replace(self, dry_run=dry_run)


def _expand_home(raw: str, home: Path) -> Path:
    if raw == "~":
        return home
    if raw.startswith("~/"):
        return home / raw[2:]
    return Path(raw)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_release_config(
    *,
    project_root: Path,
    home: Path,
    path: Path | None = None,
) -> Result[ReleaseConfig, ConfigError]:
    """Load the release configuration.

    Args:
        project_root: Top-level directory of the repository being released
        home: User home directory (base of the default tap location)
        path: Explicit config file; when None, ``<project_root>/shipit.toml``
            is used if it exists

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    if path is None:
        path = project_root / CONFIG_FILE_NAME
        if not path.is_file():
            return Ok(ReleaseConfig.defaults(project_root=project_root, home=home))

    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ReleaseConfig.from_dict(result.value, project_root=project_root, home=home))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))

"""Tests for shipit.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from shipit.core.config import CONFIG_FILE_NAME, ReleaseConfig, load_release_config
from shipit.core.result import Err, Ok


class TestDefaults:
    def test_defaults(self, tmp_path: Path) -> None:
        project = tmp_path / "widget"
        config = ReleaseConfig.defaults(project_root=project, home=tmp_path / "home")

        assert config.remote == "origin"
        assert config.fallback_commits == 5
        assert config.dry_run is False
        assert config.homebrew.tap_dir == tmp_path / "home" / "homebrew-tap"
        assert config.homebrew.branch == "main"
        assert config.homebrew.formula == "widget"
        assert config.homebrew.formula_path == tmp_path / "home" / "homebrew-tap" / "Formula" / "widget.rb"

    def test_with_dry_run_returns_copy(self, tmp_path: Path) -> None:
        config = ReleaseConfig.defaults(project_root=tmp_path, home=tmp_path)
        dry = config.with_dry_run(True)

        assert dry.dry_run is True
        assert config.dry_run is False


class TestFromDict:
    def test_overrides(self, tmp_path: Path) -> None:
        data = {
            "release": {"remote": "upstream", "fallback_commits": 10},
            "homebrew": {"tap_dir": "~/taps/mine", "branch": "master", "formula": "gadget"},
        }
        config = ReleaseConfig.from_dict(data, project_root=tmp_path, home=tmp_path / "home")

        assert config.remote == "upstream"
        assert config.fallback_commits == 10
        assert config.homebrew.tap_dir == tmp_path / "home" / "taps" / "mine"
        assert config.homebrew.branch == "master"
        assert config.homebrew.formula == "gadget"

    def test_wrong_types_fall_back_to_defaults(self, tmp_path: Path) -> None:
        data = {"release": {"remote": 3, "fallback_commits": True}, "homebrew": "nope"}
        config = ReleaseConfig.from_dict(data, project_root=tmp_path, home=tmp_path)

        assert config.remote == "origin"
        assert config.fallback_commits == 5
        assert config.homebrew.branch == "main"

    def test_rejects_non_positive_fallback(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="fallback_commits"):
            ReleaseConfig.from_dict(
                {"release": {"fallback_commits": 0}}, project_root=tmp_path, home=tmp_path
            )


class TestLoadReleaseConfig:
    def test_missing_default_file_uses_defaults(self, tmp_path: Path) -> None:
        result = load_release_config(project_root=tmp_path, home=tmp_path)

        assert isinstance(result, Ok)
        assert result.value == ReleaseConfig.defaults(project_root=tmp_path, home=tmp_path)

    def test_reads_project_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text('[release]\nremote = "upstream"\n', encoding="utf-8")

        result = load_release_config(project_root=tmp_path, home=tmp_path)

        assert isinstance(result, Ok)
        assert result.value.remote == "upstream"

    def test_explicit_missing_file_is_error(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        result = load_release_config(project_root=tmp_path, home=tmp_path, path=path)

        assert isinstance(result, Err)
        assert result.error.path == path
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text("[release\n", encoding="utf-8")

        result = load_release_config(project_root=tmp_path, home=tmp_path)

        assert isinstance(result, Err)
        assert result.error.message.startswith("Invalid TOML syntax")

    def test_invalid_structure(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text("[release]\nfallback_commits = -1\n", encoding="utf-8")

        result = load_release_config(project_root=tmp_path, home=tmp_path)

        assert isinstance(result, Err)
        assert result.error.message.startswith("Invalid config structure")

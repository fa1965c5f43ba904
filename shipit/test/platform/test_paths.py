"""Tests for shipit.platform.paths module."""

from __future__ import annotations

from pathlib import Path

import pytest

from shipit.platform.paths import clear_caches, home


@pytest.fixture(autouse=True)
def clear_path_caches() -> None:
    clear_caches()


class TestHome:
    def test_uses_home_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        assert home() == tmp_path

    def test_uses_userprofile_when_home_unset(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("HOME", raising=False)
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
        assert home() == tmp_path

    def test_cached(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        first = home()
        monkeypatch.setenv("HOME", str(tmp_path / "other"))
        assert home() == first

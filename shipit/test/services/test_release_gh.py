from __future__ import annotations

from pathlib import Path

import pytest

from shipit.core.result import Err, Ok
from shipit.platform.process import ProcessError
from shipit.services.release import gh as gh_mod


def _err(*, stderr: str, returncode: int = 1) -> Err[ProcessError]:
    return Err(
        ProcessError(
            command=("gh", "release", "create"),
            returncode=returncode,
            stdout="",
            stderr=stderr,
        )
    )


def test_create_release_returns_url(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list[list[str]] = []

    def fake_run(cmd: list[str], cwd: Path):
        assert cwd == tmp_path
        calls.append(cmd)
        return Ok("https://github.com/acme/widget/releases/tag/v1.0.0\n")

    monkeypatch.setattr(gh_mod, "run_process", fake_run)

    result = gh_mod.GhCli(repo_root=tmp_path).create_release(
        tag="v1.0.0", title="Release v1.0.0", notes="# Release v1.0.0"
    )

    assert result == Ok("https://github.com/acme/widget/releases/tag/v1.0.0")
    assert calls == [
        [
            "gh",
            "release",
            "create",
            "v1.0.0",
            "--title",
            "Release v1.0.0",
            "--notes",
            "# Release v1.0.0",
        ]
    ]


def test_create_release_failure_is_release_failed(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(
        gh_mod, "run_process", lambda cmd, cwd: _err(stderr="HTTP 422: already_exists")
    )

    result = gh_mod.GhCli(repo_root=tmp_path).create_release(tag="v1.0.0", title="t", notes="n")

    assert isinstance(result, Err)
    assert result.error.kind == "release_failed"
    assert result.error.hint == "HTTP 422: already_exists"


def test_create_release_does_not_retry(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list[list[str]] = []

    def fake_run(cmd: list[str], cwd: Path):
        del cwd
        calls.append(cmd)
        return _err(stderr="HTTP 503 Service Unavailable")

    monkeypatch.setattr(gh_mod, "run_process", fake_run)

    gh_mod.GhCli(repo_root=tmp_path).create_release(tag="v1.0.0", title="t", notes="n")
    assert len(calls) == 1


def test_release_exists(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def fake_run(cmd: list[str], cwd: Path):
        del cwd
        return Ok("title: v1.0.0\n") if cmd[-1] == "v1.0.0" else _err(stderr="release not found")

    monkeypatch.setattr(gh_mod, "run_process", fake_run)
    gh = gh_mod.GhCli(repo_root=tmp_path)

    assert gh.release_exists("v1.0.0") is True
    assert gh.release_exists("v9.9.9") is False

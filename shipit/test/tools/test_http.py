"""Tests for tools/http.py."""

from __future__ import annotations

from pathlib import Path

from shipit import __version__
from shipit.core.result import Err, Ok
from shipit.tools.http import HttpClient, HttpError, MockHttpClient, RealHttpClient


class TestHttpError:
    def test_str_with_status(self) -> None:
        error = HttpError(url="https://x/a.tar.gz", status=404, message="Not Found")
        assert str(error) == "HTTP 404: Not Found (https://x/a.tar.gz)"

    def test_str_network_error(self) -> None:
        error = HttpError(url="https://x/a.tar.gz", status=0, message="timed out")
        assert str(error) == "timed out (https://x/a.tar.gz)"


class TestMockHttpClient:
    def test_download_writes_payload(self, tmp_path: Path) -> None:
        client = MockHttpClient()
        client.set_download("https://x/a.tar.gz", b"payload")
        dest = tmp_path / "nested" / "a.tar.gz"

        assert client.download("https://x/a.tar.gz", dest) == Ok(dest)
        assert dest.read_bytes() == b"payload"
        assert client.calls == [("download", "https://x/a.tar.gz")]

    def test_unknown_url_is_404(self, tmp_path: Path) -> None:
        result = MockHttpClient().download("https://x/missing", tmp_path / "m")

        assert isinstance(result, Err)
        assert result.error.status == 404
        assert not (tmp_path / "m").exists()

    def test_configured_error(self, tmp_path: Path) -> None:
        client = MockHttpClient()
        error = HttpError(url="https://x/a", status=500, message="Server Error")
        client.set_download("https://x/a", error)

        assert client.download("https://x/a", tmp_path / "a") == Err(error)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MockHttpClient(), HttpClient)
        assert isinstance(RealHttpClient(), HttpClient)


class TestRealHttpClient:
    def test_default_user_agent(self) -> None:
        assert RealHttpClient().user_agent == f"shipit/{__version__}"

    def test_invalid_url_is_error(self, tmp_path: Path) -> None:
        result = RealHttpClient().download("not a url", tmp_path / "x")

        assert isinstance(result, Err)
        assert result.error.status == 0

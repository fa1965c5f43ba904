"""HTTP download client for release artifacts.

This module provides:
- HttpClient: Protocol for downloads (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from shipit import __version__
from shipit.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP downloads."""

    def download(self, url: str, dest: Path) -> Result[Path, HttpError]:
        """Download URL to file.

        Args:
            url: URL to download (redirects are followed)
            dest: Destination path

        Returns:
            Ok with dest path, or Err with HttpError
        """
        ...


class RealHttpClient:
    """Real HTTP client using urllib with system certificates."""

    def __init__(self, user_agent: str = f"shipit/{__version__}") -> None:
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def download(self, url: str, dest: Path) -> Result[Path, HttpError]:
        try:
            req = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
            with urllib.request.urlopen(req, context=self._ssl_context) as response:
                dest.parent.mkdir(parents=True, exist_ok=True)
                with open(dest, "wb") as f:
                    while True:
                        chunk = response.read(8192)
                        if not chunk:
                            break
                        f.write(chunk)
                return Ok(dest)

        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=e.reason))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_download("https://example.com/a.tar.gz", b"payload")
        client.download("https://example.com/a.tar.gz", tmp_path / "a.tar.gz")
    """

    def __init__(self) -> None:
        self._download_responses: dict[str, bytes | HttpError] = {}
        self.calls: list[tuple[str, str]] = []

    def set_download(self, url: str, response: bytes | HttpError) -> None:
        """Set download content (or failure) for URL."""
        self._download_responses[url] = response

    def download(self, url: str, dest: Path) -> Result[Path, HttpError]:
        self.calls.append(("download", url))
        response = self._download_responses.get(url)
        if response is None:
            return Err(HttpError(url=url, status=404, message="Not Found"))
        if isinstance(response, HttpError):
            return Err(response)

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(response)
        return Ok(dest)

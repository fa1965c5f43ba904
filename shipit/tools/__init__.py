"""Helpers for external artifacts (downloads, checksums)."""

from .checksum import sha256_file
from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient

__all__ = [
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "sha256_file",
]

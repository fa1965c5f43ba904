"""User-level path utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

__all__ = ["home"]


@lru_cache(maxsize=1)
def home() -> Path:
    """Get user's home directory.

    HOME (USERPROFILE on Windows) wins so CI and containers can redirect it;
    Path.home() covers the rest.
    """
    for var in ("HOME", "USERPROFILE"):
        value = os.environ.get(var)
        if value:
            return Path(value)
    return Path.home()


def clear_caches() -> None:
    """Clear cached paths (tests change HOME)."""
    home.cache_clear()

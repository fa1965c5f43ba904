"""Platform abstraction layer."""

from .paths import home
from .process import ProcessError, find_tool, run

__all__ = [
    # paths
    "home",
    # process
    "ProcessError",
    "find_tool",
    "run",
]

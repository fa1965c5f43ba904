"""Core domain types and logic."""

from .config import ConfigError, HomebrewConfig, ReleaseConfig, load_release_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "HomebrewConfig",
    "ReleaseConfig",
    "load_release_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]

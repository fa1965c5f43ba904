"""Exit codes for the release command.

The numeric values are process exit codes and should remain stable:
- 0: Release completed and verified
- 1: User error (bad release type, bad arguments)
- 2: Environment error (missing tools, not a git repo, no remote, bad config)
- 3: Publish error (tag, push, hosted release or tap commit failed)
- 4: Verification error (tag or hosted release missing after publishing)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the CLI."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    PUBLISH_ERROR = 3
    VERIFY_ERROR = 4

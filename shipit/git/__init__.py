"""Git operations module.

Usage:
    from shipit.git import Repository

    repo = Repository(Path("/path/to/repo"))
    match repo.list_tags():
        case Ok(tags):
            print(tags)
        case Err(e):
            print(f"git failed: {e.message}")
"""

from shipit.git.repository import (
    GitError,
    GitStatus,
    Repository,
    StatusEntry,
)

__all__ = [
    "GitError",
    "GitStatus",
    "Repository",
    "StatusEntry",
]

"""Git module error types.

These never escape :mod:`codecopy.git.ops`: every public lookup there
collapses a failure to an empty string.
"""


class GitError(Exception):
    """Base error for git operations."""

    pass


class NotARepositoryError(GitError):
    """Path is not inside a git repository."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class RemoteNotFoundError(GitError):
    """Named remote is not configured."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Remote not found: {name}")
        self.name = name

"""Git metadata module."""

from codecopy.git.errors import GitError, NotARepositoryError, RemoteNotFoundError
from codecopy.git.models import GitInfo
from codecopy.git.ops import (
    build_repo_file_url,
    get_git_branch,
    get_git_last_commit_time,
    get_git_remote_url,
    get_git_root,
    get_git_short_sha,
    resolve_git_info,
    to_https_repo_base,
)

__all__ = [
    # Lookups
    "get_git_branch",
    "get_git_last_commit_time",
    "get_git_remote_url",
    "get_git_root",
    "get_git_short_sha",
    "resolve_git_info",
    # URL helpers
    "build_repo_file_url",
    "to_https_repo_base",
    # Models
    "GitInfo",
    # Errors
    "GitError",
    "NotARepositoryError",
    "RemoteNotFoundError",
]

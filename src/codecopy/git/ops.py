"""Best-effort git metadata lookups.

Every public function returns ``""`` on any failure (not a repository,
unborn HEAD, missing remote, unreadable objects) instead of raising, so
an optional header can never block a copy.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from functools import wraps
from pathlib import Path, PurePath

import pygit2
import structlog

from codecopy.git._internal import RepoAccess
from codecopy.git.errors import GitError
from codecopy.git.models import GitInfo

log = structlog.get_logger()

_SCP_LIKE = re.compile(r"^git@([^:]+):(.+)$")


def _best_effort[**P](fn: Callable[P, str]) -> Callable[P, str]:
    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> str:
        try:
            return fn(*args, **kwargs)
        except (GitError, pygit2.GitError, KeyError, ValueError, OSError) as e:
            log.debug("git_lookup_failed", lookup=fn.__name__, error=str(e))
            return ""

    return wrapper


def _cwd(file_path: Path | str) -> Path:
    path = Path(file_path)
    return path if path.is_dir() else path.parent


@_best_effort
def get_git_root(file_path: Path | str) -> str:
    return str(RepoAccess(_cwd(file_path)).workdir)


@_best_effort
def get_git_branch(file_path: Path | str) -> str:
    return RepoAccess(_cwd(file_path)).branch_name()


@_best_effort
def get_git_short_sha(file_path: Path | str) -> str:
    return RepoAccess(_cwd(file_path)).short_sha()


@_best_effort
def get_git_last_commit_time(file_path: Path | str) -> str:
    """ISO-8601 committer time of HEAD, with the committer's offset."""
    return RepoAccess(_cwd(file_path)).last_commit_time().isoformat()


@_best_effort
def get_git_remote_url(file_path: Path | str, remote: str = "origin") -> str:
    return RepoAccess(_cwd(file_path)).remote_url(remote).strip()


def to_https_repo_base(remote_url: str) -> str:
    """Turn a remote URL into an https base without ``.git``.

    ``git@github.com:org/repo.git`` -> ``https://github.com/org/repo``.
    Returns "" for anything that does not end up as http(s).
    """
    if not remote_url:
        return ""
    url = remote_url.strip()
    if url.startswith("git@"):
        match = _SCP_LIKE.match(url)
        if match:
            url = f"https://{match.group(1)}/{match.group(2)}"
    url = re.sub(r"\.git$", "", url)
    if url.startswith(("http://", "https://")):
        return url
    return ""


def build_repo_file_url(
    base: str,
    commit_sha: str,
    repo_rel_path: str,
    start: int,
    end: int,
) -> str:
    """Permalink ``<base>/blob/<sha>/<path>#L<start>-L<end>``.

    The line anchor is omitted unless both lines are positive.
    """
    if not base or not commit_sha or not repo_rel_path:
        return ""
    anchor = f"#L{start}-L{end}" if start > 0 and end > 0 else ""
    rel = "/".join(PurePath(repo_rel_path.replace("\\", "/")).parts)
    return f"{base}/blob/{commit_sha}/{rel}{anchor}"


def _repo_relative(file_path: Path, git_root: str) -> str:
    if not git_root:
        return ""
    try:
        return file_path.resolve().relative_to(Path(git_root)).as_posix()
    except ValueError:
        return ""


def resolve_git_info(
    file_path: Path | str,
    start_line: int,
    end_line: int,
    *,
    remote: str = "origin",
) -> GitInfo:
    """Gather all git metadata for a snippet. Never raises."""
    path = Path(file_path)
    git_root = get_git_root(path)
    if not git_root:
        return GitInfo()

    branch = get_git_branch(path)
    short_sha = get_git_short_sha(path)
    commit_time = get_git_last_commit_time(path)
    remote_url = get_git_remote_url(path, remote)

    https_base = to_https_repo_base(remote_url)
    repo_rel_path = _repo_relative(path, git_root)
    repo_url = build_repo_file_url(https_base, short_sha, repo_rel_path, start_line, end_line)
    return GitInfo(
        git_root=git_root,
        branch=branch,
        short_sha=short_sha,
        commit_time=commit_time,
        remote=remote_url,
        https_base=https_base,
        repo_rel_path=repo_rel_path,
        repo_url=repo_url,
    )

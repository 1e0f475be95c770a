"""Repository access layer - owns pygit2.Repository and exposes computed facts."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pygit2

from codecopy.git.errors import GitError, NotARepositoryError, RemoteNotFoundError


class RepoAccess:
    """Owns pygit2.Repository for the repository enclosing a path."""

    def __init__(self, start_path: Path | str) -> None:
        start = Path(start_path)
        discovered = pygit2.discover_repository(str(start))
        if discovered is None:
            raise NotARepositoryError(str(start))
        try:
            self._repo = pygit2.Repository(discovered)
        except pygit2.GitError as e:
            raise NotARepositoryError(str(start)) from e

    @property
    def repo(self) -> pygit2.Repository:
        return self._repo

    @property
    def workdir(self) -> Path:
        if not self._repo.workdir:
            raise GitError("Bare repository has no working directory")
        return Path(self._repo.workdir).resolve()

    # =========================================================================
    # Repository State Facts
    # =========================================================================

    @property
    def is_unborn(self) -> bool:
        return self._repo.head_is_unborn

    @property
    def is_detached(self) -> bool:
        return self._repo.head_is_detached

    def head_commit(self) -> pygit2.Commit | None:
        if self.is_unborn:
            return None
        return self._repo.head.peel(pygit2.Commit)

    def must_head_commit(self) -> pygit2.Commit:
        commit = self.head_commit()
        if commit is None:
            raise GitError("HEAD has no commits (unborn branch)")
        return commit

    def branch_name(self) -> str:
        """Abbreviated HEAD name: the branch, or ``HEAD`` when detached."""
        if self.is_unborn:
            raise GitError("HEAD has no commits (unborn branch)")
        if self.is_detached:
            return "HEAD"
        return self._repo.head.shorthand

    def short_sha(self) -> str:
        return self.must_head_commit().short_id

    def last_commit_time(self) -> datetime:
        """HEAD committer time in the committer's own offset."""
        commit = self.must_head_commit()
        tz = timezone(timedelta(minutes=commit.commit_time_offset))
        return datetime.fromtimestamp(commit.commit_time, tz=tz)

    def remote_url(self, name: str) -> str:
        try:
            remote = self._repo.remotes[name]
        except (KeyError, ValueError) as e:
            raise RemoteNotFoundError(name) from e
        return remote.url or ""

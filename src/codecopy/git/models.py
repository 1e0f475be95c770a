"""Serializable data models for git metadata."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class GitInfo:
    """Git metadata for a snippet. Every field is "" when unavailable."""

    git_root: str = ""
    branch: str = ""
    short_sha: str = ""
    commit_time: str = ""
    remote: str = ""
    https_base: str = ""
    repo_rel_path: str = ""
    repo_url: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

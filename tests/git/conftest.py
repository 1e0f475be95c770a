"""Test fixtures for git module."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pygit2
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

COMMIT_TIME = 1_700_000_000
COMMIT_OFFSET_MINUTES = 120


@pytest.fixture
def temp_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Create a temporary git repository with initial commit."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()

    repo = pygit2.init_repository(str(repo_path), initial_head="main")

    # Configure user
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"

    # Create initial commit with a fixed committer time and offset
    (repo_path / "src").mkdir()
    (repo_path / "src" / "lib.rs").write_text("fn main() {}\n")
    repo.index.add("src/lib.rs")
    repo.index.write()
    tree = repo.index.write_tree()
    sig = pygit2.Signature("Test User", "test@example.com", COMMIT_TIME, COMMIT_OFFSET_MINUTES)
    repo.create_commit("refs/heads/main", sig, sig, "Initial commit", tree, [])

    # Set HEAD to main
    repo.set_head("refs/heads/main")

    yield repo


@pytest.fixture
def repo_with_remote(temp_repo: pygit2.Repository) -> pygit2.Repository:
    """Repository with an scp-style origin and an https upstream."""
    temp_repo.remotes.create("origin", "git@github.com:acme/widgets.git")
    temp_repo.remotes.create("upstream", "https://gitlab.com/acme/widgets.git")
    return temp_repo


@pytest.fixture
def unborn_repo(tmp_path: Path) -> pygit2.Repository:
    """Repository with no commits."""
    return pygit2.init_repository(str(tmp_path / "empty"), initial_head="main")


@pytest.fixture
def commit_stamp() -> tuple[int, int]:
    """Committer (timestamp, offset minutes) of the temp_repo initial commit."""
    return COMMIT_TIME, COMMIT_OFFSET_MINUTES

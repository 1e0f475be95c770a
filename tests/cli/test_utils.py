"""Tests for CLI utilities."""

from __future__ import annotations

from pathlib import Path

import click
import pygit2
import pytest

from codecopy.cli.utils import find_workspace_root, parse_line_range


class TestParseLineRange:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("3-9", (3, 9)), ("4", (4, 4)), ("1-1", (1, 1))],
    )
    def test_valid(self, value: str, expected: tuple[int, int]) -> None:
        assert parse_line_range(value) == expected

    @pytest.mark.parametrize("value", ["", "x", "3-", "9-3", "0-1", "-2"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(click.BadParameter):
            parse_line_range(value)


class TestFindWorkspaceRoot:
    def test_inside_repository(self, tmp_path: Path) -> None:
        repo_path = tmp_path / "repo"
        (repo_path / "src").mkdir(parents=True)
        pygit2.init_repository(str(repo_path))
        file_path = repo_path / "src" / "a.rs"
        file_path.write_text("")

        assert find_workspace_root(file_path) == repo_path.resolve()

    def test_outside_repository(self, tmp_path: Path) -> None:
        assert find_workspace_root(tmp_path) is None

"""Fixtures for context resolution tests."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

import pytest

from codecopy.context import InMemoryDocument, StrategyRegistry


class CountingParser:
    """Stand-in parser that returns a fresh token per call and counts calls."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.calls: list[str] = []
        self.fail_with = fail_with
        self._lock = threading.Lock()

    def parse(self, text: str) -> Any:
        with self._lock:
            self.calls.append(text)
            if self.fail_with is not None:
                raise self.fail_with
            return ("tree", len(self.calls), text)


@pytest.fixture
def counting_parser() -> CountingParser:
    return CountingParser()


@pytest.fixture
def registry() -> StrategyRegistry:
    """Fresh registry using the installed grammar packages."""
    return StrategyRegistry()


@pytest.fixture
def make_doc() -> Callable[..., InMemoryDocument]:
    def _make(text: str, file_name: str, language_id: str | None = None) -> InMemoryDocument:
        return InMemoryDocument(text, file_name=file_name, language_id=language_id)

    return _make

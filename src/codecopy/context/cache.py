"""Per-document syntax tree cache keyed by document identity and revision."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Protocol

import structlog

from codecopy.context.models import CachedTree

log = structlog.get_logger()


class TreeParser(Protocol):
    def parse(self, text: str) -> Any: ...


class SyntaxTreeCache:
    """Holds at most one parsed tree per document key.

    A cached tree is valid only for the revision it was parsed from.
    Requests for the same key are serialized by a per-key lock; a tree
    parsed for an older revision never replaces a newer stored one.
    """

    def __init__(self, parser: TreeParser) -> None:
        self._parser = parser
        self._entries: dict[str, CachedTree] = {}
        self._key_locks: dict[str, threading.Lock] = {}
        self._table_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def _lock_for(self, key: str) -> threading.Lock:
        with self._table_lock:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def peek(self, key: str) -> CachedTree | None:
        """Current entry for a key, without parsing."""
        return self._entries.get(key)

    def get_tree(self, key: str, revision: int, text_provider: Callable[[], str]) -> Any:
        """Return the tree for ``key`` at ``revision``, parsing only on a miss.

        ``text_provider`` is called only when a parse is needed. Parse
        failures propagate and leave the cache untouched, so the next
        request for the same revision retries.
        """
        with self._lock_for(key):
            cached = self._entries.get(key)
            if cached is not None and cached.revision == revision:
                log.debug("tree_cache_hit", key=key, revision=revision)
                return cached.tree

            tree = self._parser.parse(text_provider())

            if cached is None or cached.revision <= revision:
                self._entries[key] = CachedTree(key=key, revision=revision, tree=tree)
            log.debug(
                "tree_cache_miss",
                key=key,
                revision=revision,
                previous_revision=cached.revision if cached else None,
            )
            return tree

    def evict(self, key: str) -> None:
        """Drop the entry for a closed document."""
        with self._table_lock:
            self._entries.pop(key, None)
            self._key_locks.pop(key, None)

    def clear(self) -> None:
        with self._table_lock:
            self._entries.clear()
            self._key_locks.clear()

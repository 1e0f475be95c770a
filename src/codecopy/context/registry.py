"""Language strategy dispatcher.

Maps a document's language id to a lazily created :class:`ContextStrategy`.
Unsupported languages resolve to an empty :class:`ContextInfo`; a failing
pipeline degrades to path-based module inference. Neither case raises.

Usage::

    from codecopy.context import get_context_info

    info = get_context_info(document, Position(41, 8))
    info.function_name   # "Parser::parse_expr"
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from pathlib import Path

import structlog

from codecopy.context.document import Position, Selection, TextDocument
from codecopy.context.models import ContextInfo
from codecopy.context.packs import PACKS, ContextPack
from codecopy.context.strategy import ContextStrategy
from codecopy.core.errors import GrammarError, ParseError

log = structlog.get_logger()


class StrategyRegistry:
    """Process-wide table of language id -> strategy.

    Each strategy is created on first use, once, under a lock, so its
    grammar is loaded at most once per process.
    """

    def __init__(
        self,
        *,
        grammar_paths: Mapping[str, str] | None = None,
        workspace_root: Path | None = None,
        packs: Mapping[str, ContextPack] | None = None,
    ) -> None:
        self._packs: dict[str, ContextPack] = dict(PACKS if packs is None else packs)
        self._grammar_paths = dict(grammar_paths or {})
        self._workspace_root = workspace_root
        self._strategies: dict[str, ContextStrategy] = {}
        self._lock = threading.Lock()

    def register(self, pack: ContextPack, *aliases: str) -> None:
        """Add (or replace) support for a language."""
        with self._lock:
            for language_id in (pack.language_id, *aliases):
                self._packs[language_id] = pack
            self._strategies.pop(pack.language_id, None)

    def supported_languages(self) -> list[str]:
        return sorted(self._packs)

    def is_supported(self, language_id: str) -> bool:
        return language_id in self._packs

    def _grammar_path(self, pack: ContextPack) -> Path | None:
        rel = self._grammar_paths.get(pack.language_id)
        if not rel:
            return None
        return (self._workspace_root or Path.cwd()) / rel

    def get_strategy(self, language_id: str) -> ContextStrategy | None:
        pack = self._packs.get(language_id)
        if pack is None:
            return None
        strategy = self._strategies.get(pack.language_id)
        if strategy is not None:
            return strategy
        with self._lock:
            strategy = self._strategies.get(pack.language_id)
            if strategy is None:
                strategy = ContextStrategy(pack, self._grammar_path(pack))
                self._strategies[pack.language_id] = strategy
            return strategy

    def get_context_info(
        self,
        document: TextDocument,
        position: Position | None = None,
        selection: Selection | None = None,
    ) -> ContextInfo:
        """Structural context for a position. Never raises.

        Returns:
            Empty ContextInfo for unsupported languages; the path-based
            fallback when the language's pipeline fails.
        """
        strategy = self.get_strategy(document.language_id)
        if strategy is None:
            log.debug("context_unsupported_language", language=document.language_id)
            return ContextInfo()

        try:
            return strategy.get_context(document, position, selection)
        except GrammarError as e:
            # Logged once by the parser when the load failed.
            log.debug("context_fallback", language=document.language_id, error=e.error_name)
        except ParseError as e:
            log.warning(
                "context_fallback",
                language=document.language_id,
                error=e.error_name,
                reason=e.message,
            )
        except Exception:
            log.exception("context_failed", language=document.language_id, uri=document.uri)
        return strategy.fallback(document)


_registry: StrategyRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> StrategyRegistry:
    """Return the process-wide registry, creating a default one on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = StrategyRegistry()
    return _registry


def configure_registry(
    *,
    grammar_paths: Mapping[str, str] | None = None,
    workspace_root: Path | None = None,
) -> StrategyRegistry:
    """Replace the process-wide registry (call once at startup)."""
    global _registry
    with _registry_lock:
        _registry = StrategyRegistry(grammar_paths=grammar_paths, workspace_root=workspace_root)
    return _registry


def reset_registry() -> None:
    """Drop the process-wide registry (mainly for testing)."""
    global _registry
    with _registry_lock:
        _registry = None


def get_context_info(
    document: TextDocument,
    position: Position | None = None,
    selection: Selection | None = None,
) -> ContextInfo:
    """Structural context via the process-wide registry. Never raises."""
    return get_registry().get_context_info(document, position, selection)

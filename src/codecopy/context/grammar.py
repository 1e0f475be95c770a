"""Parser adapter: lazy, once-per-process grammar loading and parsing.

A grammar comes either from its Python distribution (``tree_sitter_rust``)
or from a precompiled shared library configured under ``grammars.paths``.
Loading happens on first use, exactly once. A failed load is remembered
and re-raised on every later call without touching the filesystem again.
"""

from __future__ import annotations

import ctypes
import importlib
import threading
from pathlib import Path
from typing import Any

import structlog
import tree_sitter

from codecopy.context.packs import ContextPack
from codecopy.core.errors import GrammarError, ParseError

log = structlog.get_logger()

_CAPSULE_NAME = b"tree_sitter.Language"


def _language_capsule(pointer: int) -> Any:
    """Wrap a raw ``TSLanguage*`` the way grammar packages hand it out."""
    capsule_new = ctypes.pythonapi.PyCapsule_New
    capsule_new.restype = ctypes.py_object
    capsule_new.argtypes = [ctypes.c_void_p, ctypes.c_char_p, ctypes.c_void_p]
    return capsule_new(pointer, _CAPSULE_NAME, None)


class GrammarParser:
    """Tree-sitter parser bound to one language pack.

    Usage::

        parser = GrammarParser(RUST_PACK)
        parser.initialize()           # optional, parse() does it lazily
        tree = parser.parse("fn main() {}")
    """

    def __init__(self, pack: ContextPack, grammar_path: Path | None = None) -> None:
        self._pack = pack
        self._grammar_path = grammar_path
        self._init_lock = threading.Lock()
        self._parse_lock = threading.Lock()
        self._parser: tree_sitter.Parser | None = None
        self._init_error: GrammarError | None = None

    @property
    def pack(self) -> ContextPack:
        return self._pack

    @property
    def grammar_path(self) -> Path | None:
        return self._grammar_path

    @property
    def is_initialized(self) -> bool:
        return self._parser is not None

    @property
    def init_error(self) -> GrammarError | None:
        return self._init_error

    def initialize(self) -> None:
        """Load the grammar once. Idempotent; a stored failure is re-raised."""
        if self._parser is not None:
            return
        with self._init_lock:
            if self._parser is not None:
                return
            if self._init_error is not None:
                raise self._init_error
            try:
                language = self._load_language()
            except GrammarError as e:
                self._init_error = e
                log.error(
                    "grammar_load_failed",
                    language=self._pack.language_id,
                    error=e.error_name,
                    reason=e.message,
                )
                raise
            self._parser = tree_sitter.Parser(language)
            log.debug(
                "grammar_loaded",
                language=self._pack.language_id,
                source=str(self._grammar_path) if self._grammar_path else self._pack.grammar_module,
            )

    def parse(self, text: str) -> tree_sitter.Tree:
        """Parse text into a best-effort tree (syntax errors become ERROR nodes).

        Raises:
            GrammarError: The grammar could not be loaded (permanent).
            ParseError: The engine failed on this text (request-scoped).
        """
        self.initialize()
        assert self._parser is not None
        with self._parse_lock:
            try:
                tree = self._parser.parse(text.encode("utf-8"))
            except (ValueError, TypeError, RuntimeError) as e:
                raise ParseError.failed(self._pack.language_id, str(e)) from e
        if tree is None:
            raise ParseError.failed(self._pack.language_id, "parser returned no tree")
        return tree

    # ------------------------------------------------------------------
    # Grammar loading
    # ------------------------------------------------------------------

    def _load_language(self) -> tree_sitter.Language:
        if self._grammar_path is not None:
            return self._load_from_library(self._grammar_path)
        return self._load_from_module()

    def _load_from_module(self) -> tree_sitter.Language:
        pack = self._pack
        try:
            module = importlib.import_module(pack.grammar_module)
        except ImportError as e:
            raise GrammarError.not_found(pack.language_id, pack.grammar_package) from e
        try:
            language_fn = getattr(module, pack.language_func)
            return tree_sitter.Language(language_fn())
        except (AttributeError, TypeError, ValueError) as e:
            raise GrammarError.load_failed(pack.language_id, str(e)) from e

    def _load_from_library(self, path: Path) -> tree_sitter.Language:
        pack = self._pack
        if not path.is_file():
            raise GrammarError.not_found(pack.language_id, str(path))
        symbol = f"tree_sitter_{pack.grammar_name}"
        try:
            library = ctypes.cdll.LoadLibrary(str(path))
            language_fn = getattr(library, symbol)
            language_fn.restype = ctypes.c_void_p
            pointer = language_fn()
            if not pointer:
                raise GrammarError.load_failed(pack.language_id, f"{symbol} returned NULL")
            return tree_sitter.Language(_language_capsule(pointer))
        except (OSError, AttributeError, TypeError, ValueError) as e:
            raise GrammarError.load_failed(pack.language_id, f"{path}: {e}") from e

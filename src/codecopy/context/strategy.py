"""ContextStrategy -- one language's parse / locate / resolve pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from codecopy.context.cache import SyntaxTreeCache
from codecopy.context.document import Position, Selection, TextDocument, line_text
from codecopy.context.extractor import locate, to_point
from codecopy.context.grammar import GrammarParser
from codecopy.context.models import ContextInfo, NodeChain
from codecopy.context.names import (
    qualify_function_name,
    resolve_function_name,
    resolve_module_path,
    resolve_type_name,
)
from codecopy.context.packs import ContextPack
from codecopy.context.paths import infer_module_from_path

log = structlog.get_logger()


class ContextStrategy:
    """Bundles the parser, tree cache, and name resolution for one pack.

    Callers normally go through :func:`codecopy.context.get_context_info`,
    which picks the strategy by language id and handles failures.
    """

    def __init__(self, pack: ContextPack, grammar_path: Path | None = None) -> None:
        self._pack = pack
        self._parser = GrammarParser(pack, grammar_path)
        self._cache = SyntaxTreeCache(self._parser)

    @property
    def pack(self) -> ContextPack:
        return self._pack

    @property
    def parser(self) -> GrammarParser:
        return self._parser

    @property
    def cache(self) -> SyntaxTreeCache:
        return self._cache

    def initialize(self) -> None:
        self._parser.initialize()

    def tree_for(self, document: TextDocument) -> Any:
        return self._cache.get_tree(document.uri, document.revision, document.get_text)

    def locate(self, document: TextDocument, position: Position) -> NodeChain:
        tree = self.tree_for(document)
        point = to_point(line_text(document, position.line), position.line, position.character)
        return locate(tree, point, self._pack)

    def resolve(self, chain: NodeChain, document: TextDocument) -> ContextInfo:
        pack = self._pack
        function_name = resolve_function_name(chain.function_node, pack)
        type_name = resolve_type_name(chain.implementation_node, chain.type_node, pack)

        if chain.module_nodes:
            module_name = resolve_module_path(chain.module_nodes, pack)
        else:
            module_name = infer_module_from_path(document.file_name, pack)

        return ContextInfo(
            function_name=qualify_function_name(function_name, type_name, pack.separator),
            class_name=type_name,
            module_name=module_name,
            extra={
                "has_impl": "true" if chain.implementation_node is not None else "false",
                "has_type": "true" if chain.type_node is not None else "false",
                "mod_depth": str(len(chain.module_nodes)),
            },
        )

    def get_context(
        self,
        document: TextDocument,
        position: Position | None = None,
        selection: Selection | None = None,
    ) -> ContextInfo:
        """Resolve context at ``position`` (default: the selection start, else the top).

        Raises:
            GrammarError: The grammar could not be loaded.
            ParseError: The document could not be parsed.
        """
        if position is None:
            position = selection.start if selection is not None else Position(0, 0)
        chain = self.locate(document, position)
        info = self.resolve(chain, document)
        log.debug(
            "context_resolved",
            language=self._pack.language_id,
            line=position.line,
            character=position.character,
            **info.to_dict(),
        )
        return info

    def fallback(self, document: TextDocument) -> ContextInfo:
        """Best-effort context without a syntax tree: path-derived module only."""
        return ContextInfo(module_name=infer_module_from_path(document.file_name, self._pack))

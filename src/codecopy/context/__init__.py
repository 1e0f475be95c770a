"""Code-context resolution: enclosing function, type, and module of a position."""

from codecopy.context.cache import SyntaxTreeCache
from codecopy.context.document import (
    FileDocument,
    InMemoryDocument,
    Position,
    Selection,
    TextDocument,
)
from codecopy.context.grammar import GrammarParser
from codecopy.context.models import CachedTree, ContextInfo, NodeChain, NodeKind
from codecopy.context.packs import PACKS, ContextPack
from codecopy.context.paths import infer_module_from_path
from codecopy.context.registry import (
    StrategyRegistry,
    configure_registry,
    get_context_info,
    get_registry,
    reset_registry,
)
from codecopy.context.strategy import ContextStrategy

__all__ = [
    # Entry point
    "get_context_info",
    "ContextInfo",
    # Documents
    "FileDocument",
    "InMemoryDocument",
    "Position",
    "Selection",
    "TextDocument",
    # Pipeline
    "CachedTree",
    "ContextPack",
    "ContextStrategy",
    "GrammarParser",
    "NodeChain",
    "NodeKind",
    "PACKS",
    "StrategyRegistry",
    "SyntaxTreeCache",
    "configure_registry",
    "get_registry",
    "infer_module_from_path",
    "reset_registry",
]

"""Data models for code-context resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True, slots=True)
class ContextInfo:
    """Structural context of a position. Every field is optional.

    A missing field means "not determined", never an error.

    Attributes:
        function_name: Innermost enclosing function, qualified as
            ``Type<sep>function`` when the type is known and the name
            carries no qualifier yet.
        class_name: Innermost enclosing type or implementation subject,
            generic arguments stripped. Never qualified.
        module_name: Enclosing module path, outermost first.
        extra: Diagnostic flags (``has_impl``, ``has_type``, ``mod_depth``).
    """

    function_name: str | None = None
    class_name: str | None = None
    module_name: str | None = None
    extra: dict[str, str] | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.function_name is None
            and self.class_name is None
            and self.module_name is None
            and self.extra is None
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output, omitting undetermined fields."""
        result: dict[str, Any] = {}
        if self.function_name is not None:
            result["function_name"] = self.function_name
        if self.class_name is not None:
            result["class_name"] = self.class_name
        if self.module_name is not None:
            result["module_name"] = self.module_name
        if self.extra is not None:
            result["extra"] = dict(self.extra)
        return result


class NodeKind(str, Enum):
    """Coarse classification of a syntax node on the ancestor chain."""

    FUNCTION = "function"
    IMPLEMENTATION = "implementation"
    TYPE_DECLARATION = "type"
    MODULE = "module"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class CachedTree:
    """A parsed tree and the document revision it was parsed from."""

    key: str
    revision: int
    tree: Any  # tree_sitter.Tree


@dataclass(frozen=True, slots=True)
class ChainLink:
    node: Any  # tree_sitter.Node
    kind: NodeKind


@dataclass
class NodeChain:
    """Ancestors of a located node, innermost first, plus the picks per kind.

    Request-scoped: nodes reference the cached tree and must not outlive
    the request that produced them.
    """

    links: list[ChainLink] = field(default_factory=list)
    function_node: Any = None
    implementation_node: Any = None
    type_node: Any = None
    module_nodes: list[Any] = field(default_factory=list)  # innermost first

"""Locate the node at a position and classify its ancestors.

The walk climbs parent links from the deepest named node at the position
to the root. Functions, implementation blocks, and type declarations keep
only the innermost match; module declarations are all kept, innermost
first.
"""

from __future__ import annotations

from typing import Any

from codecopy.context.models import ChainLink, NodeChain, NodeKind
from codecopy.context.packs import ContextPack

Point = tuple[int, int]


def to_point(line: str, row: int, character: int) -> Point:
    """Convert an editor (row, character) into a tree-sitter (row, byte) point.

    ``line`` is the text of ``row``. Characters past the end of the line
    count one byte each so the point stays past the line's end.
    """
    prefix = line[:character]
    overflow = max(character - len(line), 0)
    return (row, len(prefix.encode("utf-8")) + overflow)


def classify(node: Any, pack: ContextPack) -> NodeKind:
    node_type = node.type
    if node_type in pack.function_types:
        return NodeKind.FUNCTION
    if node_type in pack.implementation_types:
        return NodeKind.IMPLEMENTATION
    if node_type in pack.type_types:
        return NodeKind.TYPE_DECLARATION
    if node_type in pack.module_types:
        return NodeKind.MODULE
    return NodeKind.OTHER


def node_at(tree: Any, point: Point) -> Any:
    """Deepest named node spanning ``point``, or the root when none does."""
    root = tree.root_node
    if point > tuple(root.end_point):
        return root
    node = root.named_descendant_for_point_range(point, point)
    return node if node is not None else root


def collect_chain(node: Any, pack: ContextPack) -> NodeChain:
    """Walk from ``node`` to the root, recording the innermost match per kind."""
    chain = NodeChain()
    current = node
    while current is not None:
        kind = classify(current, pack)
        chain.links.append(ChainLink(node=current, kind=kind))
        if kind is NodeKind.FUNCTION:
            if chain.function_node is None:
                chain.function_node = current
        elif kind is NodeKind.IMPLEMENTATION:
            if chain.implementation_node is None:
                chain.implementation_node = current
        elif kind is NodeKind.TYPE_DECLARATION:
            if chain.type_node is None:
                chain.type_node = current
        elif kind is NodeKind.MODULE:
            chain.module_nodes.append(current)
        current = current.parent
    return chain


def locate(tree: Any, point: Point, pack: ContextPack) -> NodeChain:
    """Chain of classified ancestors for the node at ``point``."""
    return collect_chain(node_at(tree, point), pack)

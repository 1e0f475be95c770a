"""Turn located syntax nodes into display names."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from codecopy.context.packs import ContextPack

# Wrappers around the name in a C/C++ declarator chain:
# ``int *Foo::bar(int)`` -> pointer_declarator -> function_declarator -> qualified_identifier
_DECLARATOR_WRAPPERS = frozenset(
    {
        "function_declarator",
        "pointer_declarator",
        "reference_declarator",
        "parenthesized_declarator",
    }
)


def node_text(node: Any) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def strip_generic_suffix(text: str) -> str:
    """Drop everything from the first ``<``: ``"Container<T, U>"`` -> ``"Container"``.

    Textual heuristic, not a type parser.
    """
    angle = text.find("<")
    if angle == -1:
        return text.strip()
    return text[:angle].strip()


def _first_child_of_type(node: Any, types: frozenset[str]) -> Any:
    for child in node.named_children:
        if child.type in types:
            return child
    return None


def _function_name_default(node: Any, pack: ContextPack) -> str | None:
    name = node.child_by_field_name(pack.name_field)
    if name is not None:
        return node_text(name)
    child = _first_child_of_type(node, pack.identifier_types)
    return node_text(child) if child is not None else None


def _function_name_declarator(node: Any, pack: ContextPack) -> str | None:
    declarator = node.child_by_field_name("declarator")
    while declarator is not None and declarator.type in _DECLARATOR_WRAPPERS:
        inner = declarator.child_by_field_name("declarator")
        if inner is None:
            inner = _first_child_of_type(declarator, pack.identifier_types)
        declarator = inner
    if declarator is not None and declarator.type in pack.identifier_types:
        return node_text(declarator)
    return _function_name_default(node, pack)


_FUNCTION_NAME_HANDLERS: dict[str, Callable[[Any, ContextPack], str | None]] = {
    "declarator": _function_name_declarator,
}


def resolve_function_name(node: Any, pack: ContextPack) -> str | None:
    """Declared name of a function node, else its first identifier child."""
    if node is None:
        return None
    handler = _FUNCTION_NAME_HANDLERS.get(pack.function_name_handler or "", _function_name_default)
    name = handler(node, pack)
    return name or None


def resolve_type_name(
    implementation_node: Any,
    type_node: Any,
    pack: ContextPack,
) -> str | None:
    """Implementation subject if present, else the type declaration's name.

    Generic arguments are stripped either way.
    """
    if implementation_node is not None:
        subject = implementation_node.child_by_field_name(pack.implementation_type_field)
        if subject is not None:
            return strip_generic_suffix(node_text(subject)) or None

    if type_node is not None:
        name = type_node.child_by_field_name(pack.name_field)
        if name is None:
            name = _first_child_of_type(type_node, pack.type_identifier_types)
        if name is not None:
            return strip_generic_suffix(node_text(name)) or None

    return None


def resolve_module_path(module_nodes: Sequence[Any], pack: ContextPack) -> str | None:
    """Join module names outermost first. ``module_nodes`` arrive innermost first."""
    names: list[str] = []
    for module in reversed(module_nodes):
        name = module.child_by_field_name(pack.name_field)
        if name is not None:
            names.append(node_text(name))
    if not names:
        return None
    return pack.separator.join(names)


def qualify_function_name(
    function_name: str | None,
    type_name: str | None,
    separator: str,
) -> str | None:
    """``Type<sep>function`` unless either part is missing or already qualified."""
    if function_name and type_name and separator not in function_name:
        return f"{type_name}{separator}{function_name}"
    return function_name

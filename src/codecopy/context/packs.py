"""ContextPack: per-language tables driving context resolution.

Every language with structural context support has exactly ONE
ContextPack that consolidates:
- Grammar metadata (distribution, module, loader function)
- Node types classified as function / implementation / type / module
- Field names and fallback node types used to read declared names
- The qualifier separator
- Source-root and file-naming conventions for path-based module inference
- Optional name-resolution handler for grammars with nested declarators

The PACKS registry is keyed by editor language id: ``PACKS["rust"]``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContextPack:
    """Complete context-resolution configuration for a single language."""

    # -- Identity --
    language_id: str  # Editor language id ("rust", "cpp", ...)
    grammar_name: str  # tree-sitter grammar name, also the C symbol suffix

    # -- Grammar install --
    grammar_package: str  # PyPI package ("tree-sitter-rust")
    grammar_module: str  # Python import ("tree_sitter_rust")
    language_func: str = "language"

    # -- Node classification --
    function_types: frozenset[str] = frozenset()
    implementation_types: frozenset[str] = frozenset()
    type_types: frozenset[str] = frozenset()
    module_types: frozenset[str] = frozenset()

    # -- Name reading --
    name_field: str = "name"
    implementation_type_field: str = "type"
    identifier_types: frozenset[str] = frozenset({"identifier"})
    type_identifier_types: frozenset[str] = frozenset({"type_identifier"})
    function_name_handler: str | None = None

    # -- Qualification --
    separator: str = "::"

    # -- Path-based module inference --
    source_root: str = "src"
    source_extensions: tuple[str, ...] = ()
    root_filenames: frozenset[str] = frozenset()
    index_filename: str | None = None


# =========================================================================
# RUST
# =========================================================================

RUST_PACK = ContextPack(
    language_id="rust",
    grammar_name="rust",
    grammar_package="tree-sitter-rust",
    grammar_module="tree_sitter_rust",
    function_types=frozenset({"function_item", "function_signature_item"}),
    implementation_types=frozenset({"impl_item"}),
    type_types=frozenset({"struct_item", "enum_item", "trait_item", "union_item"}),
    module_types=frozenset({"mod_item"}),
    separator="::",
    source_extensions=(".rs",),
    root_filenames=frozenset({"lib", "main"}),
    index_filename="mod",
)


# =========================================================================
# PYTHON
# =========================================================================

PYTHON_PACK = ContextPack(
    language_id="python",
    grammar_name="python",
    grammar_package="tree-sitter-python",
    grammar_module="tree_sitter_python",
    function_types=frozenset({"function_definition"}),
    type_types=frozenset({"class_definition"}),
    type_identifier_types=frozenset({"identifier"}),
    separator=".",
    source_extensions=(".py", ".pyi"),
    root_filenames=frozenset({"__init__", "__main__"}),
    index_filename="__init__",
)


# =========================================================================
# C++
# =========================================================================

CPP_PACK = ContextPack(
    language_id="cpp",
    grammar_name="cpp",
    grammar_package="tree-sitter-cpp",
    grammar_module="tree_sitter_cpp",
    function_types=frozenset({"function_definition"}),
    type_types=frozenset(
        {"class_specifier", "struct_specifier", "enum_specifier", "union_specifier"}
    ),
    module_types=frozenset({"namespace_definition"}),
    identifier_types=frozenset(
        {"identifier", "field_identifier", "qualified_identifier", "destructor_name", "operator_name"}
    ),
    function_name_handler="declarator",
    separator="::",
    source_extensions=(".cpp", ".cc", ".cxx", ".hpp", ".hh", ".hxx", ".h"),
)


# =========================================================================
# Registry
# =========================================================================

_ALL_PACKS: tuple[ContextPack, ...] = (RUST_PACK, PYTHON_PACK, CPP_PACK)

PACKS: dict[str, ContextPack] = {pack.language_id: pack for pack in _ALL_PACKS}
PACKS["c++"] = CPP_PACK

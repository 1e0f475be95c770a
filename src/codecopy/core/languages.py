"""Canonical language definitions.

This module defines the authoritative mapping of:
- File extensions → editor language ids
- Filenames → editor language ids
- Language id → Markdown fence tag

Language ids follow the editor convention ("rust", "cpp", "python") because
that is what documents report and what the context registry is keyed by.
The fence tag is what goes after the opening ``` of a copied snippet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Language:
    """Canonical definition for a language id.

    Attributes:
        name: Editor language id (lowercase, e.g., "rust", "cpp")
        extensions: File extensions including dot (e.g., ".rs")
        fence: Markdown code fence tag
        filenames: Special filenames to detect (lowercase, EXACT match only)
        priority: Higher = preferred when extension is ambiguous (default 50)
    """

    name: str
    extensions: frozenset[str]
    fence: str
    filenames: frozenset[str] = field(default_factory=frozenset)
    priority: int = 50


# RULES:
# 1. All filenames MUST be lowercase (exact filenames, no globs/wildcards)
# 2. Extensions are case-insensitive (normalized to lowercase during lookup)
# 3. Priority determines winner for ambiguous extensions (higher wins)

ALL_LANGUAGES: tuple[Language, ...] = (
    Language(name="rust", extensions=frozenset({".rs"}), fence="rust", priority=80),
    Language(
        name="python",
        extensions=frozenset({".py", ".pyi", ".pyw"}),
        fence="python",
        priority=80,
    ),
    Language(
        name="typescript",
        extensions=frozenset({".ts", ".mts", ".cts"}),
        fence="typescript",
        priority=80,
    ),
    Language(name="typescriptreact", extensions=frozenset({".tsx"}), fence="tsx"),
    Language(
        name="javascript",
        extensions=frozenset({".js", ".mjs", ".cjs"}),
        fence="javascript",
        priority=80,
    ),
    Language(name="javascriptreact", extensions=frozenset({".jsx"}), fence="jsx"),
    Language(name="go", extensions=frozenset({".go"}), fence="go", priority=80),
    Language(
        name="cpp",
        extensions=frozenset({".cpp", ".cc", ".cxx", ".hpp", ".hh", ".hxx", ".h"}),
        fence="cpp",
        priority=70,
    ),
    Language(name="c", extensions=frozenset({".c", ".h"}), fence="c", priority=60),
    Language(name="java", extensions=frozenset({".java"}), fence="java"),
    Language(name="kotlin", extensions=frozenset({".kt", ".kts"}), fence="kotlin"),
    Language(name="csharp", extensions=frozenset({".cs"}), fence="csharp"),
    Language(name="ruby", extensions=frozenset({".rb"}), fence="ruby"),
    Language(name="php", extensions=frozenset({".php"}), fence="php"),
    Language(name="swift", extensions=frozenset({".swift"}), fence="swift"),
    Language(
        name="shellscript",
        extensions=frozenset({".sh", ".bash", ".zsh"}),
        fence="bash",
    ),
    Language(name="toml", extensions=frozenset({".toml"}), fence="toml", filenames=frozenset({"cargo.lock"})),
    Language(name="yaml", extensions=frozenset({".yaml", ".yml"}), fence="yaml"),
    Language(name="json", extensions=frozenset({".json"}), fence="json"),
    Language(name="markdown", extensions=frozenset({".md", ".markdown"}), fence="markdown"),
    Language(
        name="makefile",
        extensions=frozenset({".mk"}),
        fence="makefile",
        filenames=frozenset({"makefile", "gnumakefile"}),
    ),
    Language(
        name="dockerfile",
        extensions=frozenset(),
        fence="dockerfile",
        filenames=frozenset({"dockerfile"}),
    ),
)


# =============================================================================
# Lookup Tables (built from ALL_LANGUAGES)
# =============================================================================

LANGUAGES_BY_NAME: dict[str, Language] = {lang.name: lang for lang in ALL_LANGUAGES}


def _build_extension_map() -> dict[str, str]:
    """Build extension -> language id mapping, highest priority wins."""
    result: dict[str, str] = {}
    for lang in sorted(ALL_LANGUAGES, key=lambda lang: -lang.priority):
        for ext in lang.extensions:
            result.setdefault(ext.lower(), lang.name)
    return result


def _build_filename_map() -> dict[str, str]:
    """Build lowercase filename -> language id mapping."""
    result: dict[str, str] = {}
    for lang in sorted(ALL_LANGUAGES, key=lambda lang: -lang.priority):
        for filename in lang.filenames:
            result.setdefault(filename.lower(), lang.name)
    return result


EXTENSION_TO_NAME: dict[str, str] = _build_extension_map()

FILENAME_TO_NAME: dict[str, str] = _build_filename_map()


# =============================================================================
# Detection Functions
# =============================================================================


def detect_language_id(path: str | Path) -> str | None:
    """Detect the editor language id for a file path.

    Detection order:
    1. Exact filename match (e.g., "Makefile", "Dockerfile")
    2. Suffix match (e.g., ".rs")

    Returns:
        Language id or None if unknown.
    """
    p = Path(path) if isinstance(path, str) else path
    if name := FILENAME_TO_NAME.get(p.name.lower()):
        return name
    return EXTENSION_TO_NAME.get(p.suffix.lower())


def fence_language(path: str | Path) -> str:
    """Markdown fence tag for a file path, or "" when unknown."""
    language_id = detect_language_id(path)
    if language_id is None:
        return ""
    return LANGUAGES_BY_NAME[language_id].fence

"""Snippet rendering and the copy action."""

from codecopy.snippet.headers import (
    build_output,
    code_structure_header_providers,
    file_path_header_providers,
    make_formatter,
    render_selected,
)
from codecopy.snippet.models import EditorContext, HeaderOpt, Snippet
from codecopy.snippet.ops import build_snippet, copy_snippet, get_editor_context

__all__ = [
    # Action
    "build_snippet",
    "copy_snippet",
    "get_editor_context",
    # Rendering
    "build_output",
    "code_structure_header_providers",
    "file_path_header_providers",
    "make_formatter",
    "render_selected",
    # Models
    "EditorContext",
    "HeaderOpt",
    "Snippet",
]

"""The copy action: snippet text with file, git, and structural headers.

Usage::

    from codecopy.snippet import copy_snippet

    snippet = copy_snippet(document, selection, config=config, workspace_root=root)
    snippet.output   # what landed on the clipboard
"""

from __future__ import annotations

import dataclasses
import os
from datetime import datetime
from pathlib import Path

import structlog

from codecopy.config.models import CodeCopyConfig
from codecopy.context.document import Position, Selection, TextDocument
from codecopy.context.registry import get_context_info
from codecopy.core.console import show_error, show_info
from codecopy.core.errors import ClipboardError
from codecopy.core.languages import fence_language
from codecopy.core.logging import copy_action
from codecopy.git.ops import resolve_git_info
from codecopy.snippet import clipboard
from codecopy.snippet.headers import (
    build_output,
    code_structure_header_providers,
    file_path_header_providers,
    make_formatter,
    render_selected,
)
from codecopy.snippet.models import EditorContext, Snippet

log = structlog.get_logger()


def get_editor_context(
    document: TextDocument,
    selection: Selection | None,
    workspace_root: Path | None = None,
) -> EditorContext:
    """Selected text and line range, or the whole document when nothing is selected."""
    if selection is not None and not selection.is_empty:
        selected_text = document.get_text(selection)
        start_line = selection.start.line + 1
        end_line = selection.end.line + 1
        # A whole-line selection ends at column 0 of the following line
        if selection.end.character == 0 and selection.end.line > selection.start.line:
            end_line -= 1
        end_line = min(end_line, document.line_count)
        start_line = min(start_line, end_line)
    else:
        selected_text = document.get_text()
        start_line = 1
        end_line = document.line_count

    file_path = document.file_name
    relative_path = os.path.relpath(file_path, workspace_root) if workspace_root else file_path
    lang = fence_language(relative_path) or document.language_id or ""

    return EditorContext(
        document=document,
        selected_text=selected_text,
        start_line=start_line,
        end_line=end_line,
        file_path=file_path,
        relative_path=relative_path,
        workspace_name=workspace_root.name if workspace_root else "",
        file_name=Path(file_path).name,
        lang=lang,
    )


def build_snippet(
    document: TextDocument,
    selection: Selection | None = None,
    *,
    config: CodeCopyConfig | None = None,
    workspace_root: Path | None = None,
    now: datetime | None = None,
) -> Snippet:
    """Render the clipboard text for a document and selection. Never writes anywhere."""
    config = config or CodeCopyConfig()
    ctx = get_editor_context(document, selection, workspace_root)

    git = resolve_git_info(ctx.file_path, ctx.start_line, ctx.end_line, remote=config.git.remote)

    position = selection.start if selection is not None else Position(ctx.start_line - 1, 0)
    info = get_context_info(document, position, selection)

    headers = config.headers
    fmt = make_formatter(headers.plain_text)
    header_lines = [
        *render_selected(headers.file_path_headers, file_path_header_providers(ctx, git, fmt, now=now)),
        *render_selected(headers.code_structure_headers, code_structure_header_providers(info, fmt)),
    ]
    output = build_output(header_lines, headers.plain_text, ctx.lang, ctx.selected_text)
    return Snippet(output=output, editor=ctx, context=info, git=git)


def copy_snippet(
    document: TextDocument,
    selection: Selection | None = None,
    *,
    config: CodeCopyConfig | None = None,
    workspace_root: Path | None = None,
    write_clipboard: bool = True,
) -> Snippet:
    """Build the snippet and put it on the clipboard.

    A clipboard failure is reported to the user and the rendered snippet
    is still returned (with ``copied=False``) so the caller can fall back.
    """
    with copy_action():
        snippet = build_snippet(document, selection, config=config, workspace_root=workspace_root)
        log.info(
            "snippet_built",
            file=snippet.editor.relative_path,
            lines=f"{snippet.editor.start_line}-{snippet.editor.end_line}",
        )
        if not write_clipboard:
            return snippet
        try:
            clipboard.write_text(snippet.output)
        except ClipboardError as e:
            log.warning("clipboard_write_failed", error=e.error_name, reason=e.message)
            show_error(e.message)
            return snippet
        show_info("Copied code with context!")
        return dataclasses.replace(snippet, copied=True)

"""Data models for a copied snippet."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from codecopy.context.document import TextDocument
from codecopy.context.models import ContextInfo
from codecopy.git.models import GitInfo


@dataclass(frozen=True, slots=True)
class EditorContext:
    """What is being copied and from where. Lines are 1-based, inclusive."""

    document: TextDocument
    selected_text: str
    start_line: int
    end_line: int
    file_path: str
    relative_path: str
    workspace_name: str
    file_name: str
    lang: str


@dataclass(frozen=True, slots=True)
class HeaderOpt:
    """A header line that can be selected by id and rendered on demand."""

    id: str
    render: Callable[[], str]


@dataclass(frozen=True, slots=True)
class Snippet:
    """Rendered clipboard text plus everything that went into it."""

    output: str
    editor: EditorContext
    context: ContextInfo
    git: GitInfo
    copied: bool = False

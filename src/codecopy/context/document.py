"""Text buffer and selection interfaces consumed by the context engine.

The engine never talks to an editor directly. Anything that can report
its text, identity, revision, and language id can be resolved:
``InMemoryDocument`` models an editor buffer, ``FileDocument`` a file
on disk.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from codecopy.core.languages import detect_language_id

# Coarsest common mtime granularity (FAT)
_MTIME_SLACK_NS = 2_000_000_000


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line and character offset."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class Selection:
    """Zero-based selection. ``start`` precedes or equals ``end``."""

    start: Position
    end: Position

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @classmethod
    def from_lines(cls, start_line: int, end_line: int) -> Selection:
        """Whole-line selection covering ``start_line..end_line`` (zero-based, inclusive)."""
        return cls(Position(start_line, 0), Position(end_line + 1, 0))


@runtime_checkable
class TextDocument(Protocol):
    """Active text buffer as seen by the context engine."""

    @property
    def uri(self) -> str: ...

    @property
    def file_name(self) -> str: ...

    @property
    def language_id(self) -> str: ...

    @property
    def revision(self) -> int: ...

    @property
    def line_count(self) -> int: ...

    def get_text(self, selection: Selection | None = None) -> str: ...


def _line_starts(text: str) -> list[int]:
    """Offsets where each line begins. Only ``\\n`` ends a line, as in the parser's rows."""
    starts = [0]
    newline = text.find("\n")
    while newline != -1:
        starts.append(newline + 1)
        newline = text.find("\n", newline + 1)
    return starts


def _slice(text: str, selection: Selection | None) -> str:
    if selection is None:
        return text
    starts = _line_starts(text)

    def offset(pos: Position) -> int:
        if pos.line >= len(starts):
            return len(text)
        begin = starts[pos.line]
        end = starts[pos.line + 1] - 1 if pos.line + 1 < len(starts) else len(text)
        if end > begin and text[end - 1] == "\r":
            end -= 1
        return begin + min(pos.character, end - begin)

    return text[offset(selection.start) : offset(selection.end)]


def _count_lines(text: str) -> int:
    return text.count("\n") + 1


def line_text(document: TextDocument, line: int) -> str:
    """Text of a single line without its terminator ("" past the end)."""
    if line < 0 or line >= document.line_count:
        return ""
    text = document.get_text(Selection(Position(line, 0), Position(line + 1, 0)))
    return text.rstrip("\r\n")


class InMemoryDocument:
    """Editor-style buffer: every ``update`` advances the revision."""

    def __init__(
        self,
        text: str,
        *,
        file_name: str,
        language_id: str | None = None,
        uri: str | None = None,
        revision: int = 1,
    ) -> None:
        self._text = text
        self._file_name = file_name
        self._language_id = language_id or detect_language_id(file_name) or "plaintext"
        self._uri = uri or Path(file_name).absolute().as_uri()
        self._revision = revision

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def line_count(self) -> int:
        return _count_lines(self._text)

    def get_text(self, selection: Selection | None = None) -> str:
        return _slice(self._text, selection)

    def update(self, text: str) -> None:
        self._text = text
        self._revision += 1


class FileDocument:
    """A file on disk.

    The revision is a counter that advances whenever the file's content
    changes. A changed ``(mtime, size, inode)`` signature triggers a
    re-read; so does an unchanged signature whose mtime lies within
    ``_MTIME_SLACK_NS`` of the last read, since a rewrite in the same
    timestamp tick would otherwise go unnoticed.
    """

    def __init__(self, path: Path, *, language_id: str | None = None) -> None:
        self._path = path.resolve()
        self._language_id = language_id or detect_language_id(self._path) or "plaintext"
        self._text: str | None = None
        self._signature: tuple[int, int, int] | None = None
        self._read_at_ns = 0
        self._revision = 0
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def uri(self) -> str:
        return self._path.as_uri()

    @property
    def file_name(self) -> str:
        return str(self._path)

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def revision(self) -> int:
        with self._lock:
            self._sync()
            return self._revision

    @property
    def line_count(self) -> int:
        return _count_lines(self._read())

    def get_text(self, selection: Selection | None = None) -> str:
        return _slice(self._read(), selection)

    def _read(self) -> str:
        with self._lock:
            return self._sync()

    def _sync(self) -> str:
        st = self._path.stat()
        signature = (st.st_mtime_ns, st.st_size, st.st_ino)
        racy = st.st_mtime_ns + _MTIME_SLACK_NS >= self._read_at_ns
        if self._text is not None and signature == self._signature and not racy:
            return self._text

        read_at = time.time_ns()
        text = self._path.read_text(encoding="utf-8", errors="replace")
        if text != self._text:
            self._text = text
            self._revision += 1
        self._signature = signature
        self._read_at_ns = read_at
        return text

"""System clipboard access via pyperclip."""

from __future__ import annotations

import pyperclip

from codecopy.core.errors import ClipboardError


def write_text(text: str) -> None:
    """Copy text to the system clipboard.

    Raises:
        ClipboardError: No clipboard mechanism is available (e.g. headless Linux
            without xclip/xsel/wl-clipboard).
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError.unavailable(str(e)) from e

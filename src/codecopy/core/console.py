"""User-facing notifications for the copy action.

Stands in for an editor's info/error message surface. Messages go to
stderr so stdout stays clean for ``ccopy copy --stdout``.

Usage::

    from codecopy.core.console import show_error, show_info, status

    show_info("Copied code with context!")   # ✓ Copied code with context!
    show_error("No active editor")           # ✗ No active editor
    status("Resolving context...")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

# Console for output
_console = Console(stderr=True)

# Style prefixes
_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def _get_logger() -> BoundLogger:
    """Get logger lazily to respect runtime config."""
    from codecopy.core.logging import get_logger

    return get_logger("console")


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def set_console(console: Console) -> None:
    """Replace the shared console (tests capture output this way)."""
    global _console
    _console = console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{escape(message)}", highlight=False)

    _get_logger().debug("status", message=message, style=style)


def show_info(message: str) -> None:
    status(message, style="success")


def show_error(message: str) -> None:
    status(message, style="error")

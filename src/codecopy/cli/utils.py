"""CLI utilities."""

from pathlib import Path

import click

from codecopy.config import CodeCopyConfig, load_config
from codecopy.context import configure_registry
from codecopy.core.errors import CodeCopyError
from codecopy.core.logging import configure_logging
from codecopy.git import get_git_root


def find_workspace_root(path: Path) -> Path | None:
    """Git working tree containing path, or None outside a repository."""
    root = get_git_root(path)
    return Path(root) if root else None


def parse_line_range(value: str) -> tuple[int, int]:
    """Parse ``A-B`` (or a single ``A``) into a 1-based inclusive range.

    Raises:
        click.BadParameter: If the range is malformed or inverted.
    """
    start_s, sep, end_s = value.partition("-")
    try:
        start = int(start_s)
        end = int(end_s) if sep else start
    except ValueError:
        raise click.BadParameter(f"expected A-B, got {value!r}", param_hint="--lines") from None
    if start < 1 or end < start:
        raise click.BadParameter(f"invalid line range {value!r}", param_hint="--lines")
    return start, end


def bootstrap(ctx: click.Context, path: Path) -> tuple[CodeCopyConfig, Path | None]:
    """Load config for the workspace containing path and wire up logging and grammars.

    Returns:
        The resolved config and the workspace root (None outside git).

    Raises:
        click.ClickException: If the configuration is invalid.
    """
    file_path = path.resolve()
    workspace_root = find_workspace_root(file_path)
    config_root = workspace_root or (file_path if file_path.is_dir() else file_path.parent)

    try:
        config = load_config(config_root)
    except CodeCopyError as e:
        raise click.ClickException(str(e)) from e

    if ctx.obj and ctx.obj.get("verbose"):
        configure_logging(level="DEBUG")
    else:
        configure_logging(config=config.logging)

    configure_registry(grammar_paths=config.grammars.paths, workspace_root=config_root)
    return config, workspace_root

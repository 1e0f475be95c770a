"""ccopy copy command - copy a file or line range with context headers."""

from pathlib import Path

import click

from codecopy.cli.utils import bootstrap, parse_line_range
from codecopy.context import FileDocument, Selection
from codecopy.snippet import copy_snippet


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--lines", "line_range", metavar="A-B", help="1-based inclusive line range")
@click.option("--plain", is_flag=True, help="Plain-text headers, no code fence")
@click.option("--stdout", "to_stdout", is_flag=True, help="Also print the snippet")
@click.option("--no-clipboard", is_flag=True, help="Do not touch the clipboard")
@click.pass_context
def copy_command(
    ctx: click.Context,
    path: Path,
    line_range: str | None,
    plain: bool,
    to_stdout: bool,
    no_clipboard: bool,
) -> None:
    """Copy PATH (or a line range of it) with context headers.

    If the clipboard is unavailable the snippet is printed instead and the
    command exits with status 1.
    """
    config, workspace_root = bootstrap(ctx, path)
    if plain:
        config = config.model_copy(
            update={"headers": config.headers.model_copy(update={"plain_text": True})}
        )

    document = FileDocument(path)
    selection = None
    if line_range:
        start, end = parse_line_range(line_range)
        if start > document.line_count:
            raise click.BadParameter(
                f"line {start} is past the end of {path.name} ({document.line_count} lines)",
                param_hint="--lines",
            )
        selection = Selection.from_lines(start - 1, end - 1)

    snippet = copy_snippet(
        document,
        selection,
        config=config,
        workspace_root=workspace_root,
        write_clipboard=not no_clipboard,
    )

    clipboard_failed = not no_clipboard and not snippet.copied
    if to_stdout or clipboard_failed:
        click.echo(snippet.output, nl=False)
    if clipboard_failed:
        ctx.exit(1)

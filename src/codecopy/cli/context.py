"""ccopy context command - show the structural context at a position."""

import json
from pathlib import Path

import click

from codecopy.cli.utils import bootstrap
from codecopy.context import FileDocument, Position, get_context_info


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--line", type=click.IntRange(min=1), required=True, help="1-based line")
@click.option("--column", type=click.IntRange(min=1), default=1, show_default=True, help="1-based column")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def context_command(ctx: click.Context, path: Path, line: int, column: int, as_json: bool) -> None:
    """Print the enclosing function, type, and module at a position in PATH."""
    bootstrap(ctx, path)

    document = FileDocument(path)
    info = get_context_info(document, Position(line - 1, column - 1))

    if as_json:
        click.echo(json.dumps(info.to_dict()))
        return

    if info.is_empty:
        click.echo("No context found.")
        return
    if info.function_name:
        click.echo(f"Function: {info.function_name}")
    if info.class_name:
        click.echo(f"Class: {info.class_name}")
    if info.module_name:
        click.echo(f"Module: {info.module_name}")

"""CodeCopy CLI - ccopy command."""

import click

from codecopy.cli.context import context_command
from codecopy.cli.copy import copy_command
from codecopy.cli.languages import languages_command
from codecopy.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="ccopy")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """CodeCopy - copy code with file, git, and structural context."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(copy_command, name="copy")
cli.add_command(context_command, name="context")
cli.add_command(languages_command, name="languages")


if __name__ == "__main__":
    cli()

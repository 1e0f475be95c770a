"""ccopy languages command - list languages with structural context support."""

import json

import click

from codecopy.context import get_registry


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def languages_command(as_json: bool) -> None:
    """List language ids with a context strategy."""
    languages = get_registry().supported_languages()
    if as_json:
        click.echo(json.dumps(languages))
        return
    for language in languages:
        click.echo(language)

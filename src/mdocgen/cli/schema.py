from __future__ import annotations

import json

import click

from mdocgen import description
from mdocgen.cli import decorators as cli_decorators


@cli_decorators.mdocgen_command("schema")
@click.option(
    "--indent",
    type=int,
    default=2,
    help="JSON indentation (0 for compact)",
)
def schema(indent: int) -> None:
    """Output JSON Schema for page description files."""
    json_schema = description.PageSpec.model_json_schema()
    indent_val = indent if indent > 0 else None
    click.echo(json.dumps(json_schema, indent=indent_val))

"""CLI command: less-theme vars -- show the variables declared in a file."""

from __future__ import annotations

import json
from pathlib import Path

import click

from less_theme.variables import build_variable_map, is_valid_color, resolve_variable


@click.command("vars")
@click.argument("varfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the map as JSON")
@click.option("--colors", "colors_only", is_flag=True, help="Only variables that resolve to a color")
def vars_(varfile: str, as_json: bool, colors_only: bool) -> None:
    """List the single-line variable declarations of VARFILE."""
    variables = build_variable_map(Path(varfile).read_text(encoding="utf-8"))
    if colors_only:
        variables = {
            name: value
            for name, value in variables.items()
            if is_valid_color(resolve_variable(name, variables))
        }

    if as_json:
        click.echo(json.dumps(variables, indent=2))
        return
    for name, value in variables.items():
        click.echo(f"{name}: {value}")

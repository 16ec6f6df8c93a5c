"""less-theme CLI entry point: Click group with subcommands."""

import click

from less_theme import __version__


@click.group()
@click.version_option(version=__version__, prog_name="less-theme")
def cli() -> None:
    """less-theme - build runtime-overridable theme stylesheets from LESS."""


# Import and register subcommands
from less_theme.cli.generate import generate  # noqa: E402
from less_theme.cli.vars import vars_  # noqa: E402
from less_theme.cli.serve import serve  # noqa: E402

cli.add_command(generate)
cli.add_command(vars_)
cli.add_command(serve)

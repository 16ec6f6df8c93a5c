"""CLI command: less-theme serve -- preview server for generated themes."""

from __future__ import annotations

import click

from less_theme.config import DEFAULT_INCLUDE, ThemeConfig


@click.command()
@click.option("--styles-dir", required=True, type=click.Path(exists=True, file_okay=False), help="Directory of style files to reduce")
@click.option("--var-file", required=True, type=click.Path(exists=True, dir_okay=False), help="Variable declaration file")
@click.option("--theme-variable", "theme_variables", multiple=True, help="Theme variable name (repeatable)")
@click.option("--include", multiple=True, help="Glob of style files to reduce")
@click.option("--color-file", default=None, type=click.Path(exists=True, dir_okay=False), help="Secondary color variable file")
@click.option("--lessc", default=None, help="lessc executable (default $LESSC or lessc)")
@click.option("--module-root", default=None, type=click.Path(file_okay=False), help="Directory holding node_modules for ~ imports")
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(
    styles_dir: str,
    var_file: str,
    theme_variables: tuple[str, ...],
    include: tuple[str, ...],
    color_file: str | None,
    lessc: str | None,
    module_root: str | None,
    host: str,
    port: int,
    debug: bool,
) -> None:
    """Start the theme preview server."""
    from less_theme.compiler import LesscCompiler
    from less_theme.theme import ThemeGenerator
    from less_theme.web.app import create_app

    config = ThemeConfig(
        styles_dir=styles_dir,
        var_file=var_file,
        theme_variables=theme_variables or None,
        include=include or DEFAULT_INCLUDE,
        color_file=color_file,
    )
    generator = ThemeGenerator(
        compiler=LesscCompiler(executable=lessc, module_root=module_root),
        module_root=module_root,
    )
    app = create_app(config, generator=generator)
    click.echo(f"Serving theme on {host}:{port}")
    app.run(host=host, port=port, debug=debug)

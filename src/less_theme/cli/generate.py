"""CLI command: less-theme generate -- build a theme stylesheet."""

from __future__ import annotations

import logging
import sys

import click

from less_theme.compiler import CompilationError, LesscCompiler
from less_theme.config import DEFAULT_COLOR_FILE_THEME_REGEX, DEFAULT_INCLUDE, ThemeConfig
from less_theme.errors import ThemeError
from less_theme.theme import ThemeGenerator


def parse_pairs(values: tuple[str, ...], option: str) -> dict[str, str]:
    """Split ``NAME=VALUE`` option values into a dict."""
    pairs: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {item!r}", param_hint=option)
        pairs[name.strip()] = value.strip()
    return pairs


def _coerce_option(value: str) -> object:
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    return value


@click.command()
@click.option("--styles-dir", required=True, type=click.Path(exists=True, file_okay=False), help="Directory of style files to reduce")
@click.option("--var-file", required=True, type=click.Path(exists=True, dir_okay=False), help="Variable declaration file")
@click.option("--output", "output_file_path", default=None, help="Write the theme to this path")
@click.option("--theme-variable", "theme_variables", multiple=True, help="Theme variable name (repeatable)")
@click.option("--exclude", "exclude_variables", multiple=True, help="Variable left out of the inferred set (repeatable)")
@click.option("--include", multiple=True, help=f"Glob of style files to reduce (default {DEFAULT_INCLUDE[0]})")
@click.option("--main-less-file", default=None, type=click.Path(exists=True, dir_okay=False), help="Additional variable source")
@click.option("--color-file", default=None, type=click.Path(exists=True, dir_okay=False), help="Secondary color variable file")
@click.option("--color-file-theme-regex", default=DEFAULT_COLOR_FILE_THEME_REGEX, show_default=True, help="Theme variables of the color file")
@click.option("--replace", "replacements", multiple=True, help="Override a theme variable: NAME=VALUE")
@click.option("--option", "compiler_options", multiple=True, help="Compiler option: KEY=VALUE")
@click.option("--palette-shades", is_flag=True, help="Emit shade variables as colorPalette() calls")
@click.option("--lessc", default=None, help="lessc executable (default $LESSC or lessc)")
@click.option("--module-root", default=None, type=click.Path(file_okay=False), help="Directory holding node_modules for ~ imports")
@click.option("--verbose", "-v", is_flag=True, help="Log pipeline progress")
def generate(
    styles_dir: str,
    var_file: str,
    output_file_path: str | None,
    theme_variables: tuple[str, ...],
    exclude_variables: tuple[str, ...],
    include: tuple[str, ...],
    main_less_file: str | None,
    color_file: str | None,
    color_file_theme_regex: str,
    replacements: tuple[str, ...],
    compiler_options: tuple[str, ...],
    palette_shades: bool,
    lessc: str | None,
    module_root: str | None,
    verbose: bool,
) -> None:
    """Generate a theme stylesheet from a styles directory and a variable file.

    Prints the theme to stdout unless --output is given.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    options = {k: _coerce_option(v) for k, v in parse_pairs(compiler_options, "--option").items()}
    config = ThemeConfig(
        styles_dir=styles_dir,
        var_file=var_file,
        main_less_file=main_less_file,
        output_file_path=output_file_path,
        theme_variables=theme_variables or None,
        exclude_variables=exclude_variables,
        include=include or DEFAULT_INCLUDE,
        options=options,
        color_file=color_file,
        color_file_theme_regex=color_file_theme_regex,
        theme_replacement=parse_pairs(replacements, "--replace"),
        palette_shades=palette_shades,
    )
    generator = ThemeGenerator(
        compiler=LesscCompiler(executable=lessc, module_root=module_root),
        module_root=module_root,
    )

    try:
        css = generator.generate(config)
    except CompilationError as exc:
        click.echo(f"Compilation failed: {exc}", err=True)
        if exc.diagnostic:
            click.echo(exc.diagnostic, err=True)
        sys.exit(1)
    except (ThemeError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_file_path:
        click.echo(f"Theme written to {output_file_path}")
    else:
        click.echo(css, nl=False)

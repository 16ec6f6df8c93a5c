"""ThemeGenerator: derive a runtime theme stylesheet from LESS sources.

The pipeline runs sequentially, each stage feeding the next:

1. resolve variables from the (import-flattened) variable file
2. resolve the list of theme variables
3. compile a marker probe to learn each theme variable's literal color
4. compile the variable source and every corpus file (files in parallel)
5. reduce the compiled CSS to rules using those colors
6. substitute the colors back with variable references
7. prepend the theme variable declarations and tidy the lines
"""

from __future__ import annotations

import glob
import logging
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Mapping

from less_theme.compiler.base import Compiler
from less_theme.compiler.bundler import Bundler
from less_theme.compiler.lessc import LesscCompiler
from less_theme.config import ThemeConfig
from less_theme.errors import ThemeError
from less_theme.stylesheet.reducer import reduce_css
from less_theme.theme.cache import ThemeCache, fingerprint
from less_theme.theme.markers import build_probe, extract_marker_colors, marker_name
from less_theme.variables.colors import SHADE_RE, palette_shade
from less_theme.variables.parser import (
    SIGIL,
    build_variable_map,
    get_less_vars,
    merge_variable_maps,
    referenced_variables,
)

logger = logging.getLogger(__name__)

_CUSTOM_PROPERTY_RE = re.compile(r"var\(\s*--([a-zA-Z0-9_-]+)\s*(?:,[^)]*)?\)")


def rewrite_custom_properties(source: str, variables: Mapping[str, str]) -> str:
    """Turn ``var(--primary-6)`` into ``@primary-6`` for known variables."""

    def replace(match: re.Match[str]) -> str:
        name = SIGIL + match.group(1)
        return name if name in variables else match.group(0)

    return _CUSTOM_PROPERTY_RE.sub(replace, source)


def _color_pattern(color: str) -> re.Pattern[str]:
    if color.startswith("#"):
        # #fff must not match the start of #ffffff.
        return re.compile(re.escape(color) + r"(?![0-9a-fA-F])", re.IGNORECASE)
    return re.compile(re.escape(color))


def _unique_lines(text: str) -> list[str]:
    seen: set[str] = set()
    lines: list[str] = []
    for line in text.split("\n"):
        if not line.strip() or line in seen:
            continue
        seen.add(line)
        lines.append(line)
    return lines


class ThemeGenerator:
    """Runs the theme pipeline against an injected compiler."""

    def __init__(
        self,
        compiler: Compiler | None = None,
        cache: ThemeCache | None = None,
        *,
        module_root: str | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.compiler = compiler or LesscCompiler(module_root=module_root)
        self.cache = cache if cache is not None else ThemeCache()
        self.module_root = module_root
        self.max_workers = max_workers

    # --- entry point ---

    def generate(self, config: ThemeConfig) -> str:
        style_files = self.style_files(config)
        key = fingerprint(
            config,
            [config.var_file, config.color_file, config.main_less_file, *style_files],
        )
        css = self.cache.get(key)
        if css is not None:
            logger.debug("Theme cache hit (%s)", key[:12])
        else:
            css = self._run(config, style_files)

        if config.output_file_path:
            output = Path(config.output_file_path)
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(css, encoding="utf-8")
            logger.info("Theme generated successfully. Output file: %s", output)
        else:
            logger.info("Theme generated successfully")

        self.cache.put(key, css)
        return css

    def _run(self, config: ThemeConfig, style_files: list[Path]) -> str:
        source, variables, color_variables = self.resolve_variables(config)
        theme_variables = self.resolve_theme_variables(config, variables, color_variables)
        colors = self.probe_colors(config, source, theme_variables)
        compiled = self.compile_corpus(config, source, style_files, color_variables)
        reduced = reduce_css(compiled, colors.values())
        substituted = self.resubstitute(
            reduced, colors, theme_variables, palette_shades=config.palette_shades
        )
        return self.finalize(substituted, theme_variables, variables, config.theme_replacement)

    # --- stages ---

    def _search_paths(self, config: ThemeConfig) -> list[str]:
        paths = [str(Path(config.styles_dir))]
        var_dir = str(Path(config.var_file).parent)
        if var_dir not in paths:
            paths.append(var_dir)
        return paths

    def resolve_variables(
        self, config: ThemeConfig
    ) -> tuple[str, dict[str, str], dict[str, str]]:
        """Return the flattened variable source, all variables and the color file theme variables."""
        bundler = Bundler(paths=[config.styles_dir], module_root=self.module_root)
        source = bundler.bundle_file(config.var_file)
        variables = build_variable_map(source)

        if config.main_less_file:
            main_source = Path(config.main_less_file).read_text(
                encoding="utf-8", errors="replace"
            )
            variables = merge_variable_maps(variables, build_variable_map(main_source))

        color_variables: dict[str, str] = {}
        if config.color_file:
            color_bundler = Bundler(paths=[config.styles_dir], module_root=self.module_root)
            color_source = color_bundler.bundle_file(config.color_file)
            pattern = re.compile(config.color_file_theme_regex)
            color_variables = {
                name: value
                for name, value in build_variable_map(color_source).items()
                if pattern.search(name)
            }
            variables = merge_variable_maps(variables, color_variables)
            declarations = "\n".join(f"{n}: {v};" for n, v in color_variables.items())
            source = f"{source}\n{declarations}"

        return source, variables, color_variables

    def resolve_theme_variables(
        self,
        config: ThemeConfig,
        variables: Mapping[str, str],
        color_variables: Mapping[str, str] | None = None,
    ) -> list[str]:
        if config.theme_variables is not None:
            names = list(config.theme_variables)
        else:
            var_source = Path(config.var_file).read_text(encoding="utf-8", errors="replace")
            declared = get_less_vars(var_source)
            names = [n for n in declared if n not in config.exclude_variables]
            names.extend(n for n in (color_variables or {}) if n not in names)
        if not names:
            names = [config.default_theme_variable]

        resolved: list[str] = []
        for name in names:
            if name in variables and name not in resolved:
                resolved.append(name)
        return resolved

    def probe_colors(
        self, config: ThemeConfig, source: str, theme_variables: list[str]
    ) -> dict[str, str]:
        """Compile the marker probe and return marker name -> literal color."""
        if not theme_variables:
            return {}
        probe = build_probe(theme_variables)
        css = self.compiler.compile(
            f"{source}\n{probe}",
            paths=self._search_paths(config),
            filename=config.var_file,
            options=config.options,
        )
        markers = {marker_name(v) for v in theme_variables}
        return {k: v for k, v in extract_marker_colors(css).items() if k in markers}

    def style_files(self, config: ThemeConfig) -> list[Path]:
        root = Path(config.styles_dir)
        if not root.is_dir():
            raise FileNotFoundError(f"Styles directory not found: {root}")
        found: list[Path] = []
        for pattern in config.include:
            if Path(pattern).is_absolute():
                matches = [Path(p) for p in glob.glob(pattern, recursive=True)]
            else:
                matches = list(root.glob(pattern))
            for path in sorted(matches):
                path = path.resolve()
                if path.is_file() and path not in found:
                    found.append(path)
        return found

    def compile_corpus(
        self,
        config: ThemeConfig,
        source: str,
        style_files: list[Path],
        color_variables: Mapping[str, str] | None = None,
    ) -> str:
        """Compile the variable source and every style file, concatenated.

        A style file that fails to compile contributes an empty line.
        """
        variables_css = self.compiler.compile(
            f"\n{source}",
            paths=self._search_paths(config),
            filename=config.var_file,
            options=config.options,
        )
        if not style_files:
            return variables_css

        def _compile(path: Path) -> str:
            try:
                return self._compile_style_file(config, path, style_files, color_variables or {})
            except (ThemeError, OSError) as exc:
                logger.warning("Error compiling %s: %s", path, exc)
                return "\n"

        workers = self.max_workers or min(32, len(style_files))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(_compile, path) for path in style_files]
            results = [future.result() for future in futures]

        return "\n".join(results) + "\n" + variables_css

    def _compile_style_file(
        self,
        config: ThemeConfig,
        path: Path,
        style_files: list[Path],
        color_variables: Mapping[str, str],
    ) -> str:
        var_file = Path(config.var_file).resolve()
        text = path.read_text(encoding="utf-8", errors="replace")
        header = [f'@import "{var_file.as_posix()}";']
        if color_variables:
            text = rewrite_custom_properties(text, color_variables)
            header.extend(f"{n}: {v};" for n, v in color_variables.items())
        text = "\n".join([*header, text])

        # Other corpus files are compiled on their own; importing them here
        # would emit their rules twice.
        skip = [p for p in style_files if p != path and p != var_file]
        bundler = Bundler(
            paths=[config.styles_dir],
            module_root=self.module_root,
            skip=skip,
        )
        source = bundler.bundle_source(text, path.parent)
        return self.compiler.compile(
            source,
            paths=[config.styles_dir, str(path.parent)],
            filename=str(path),
            options=config.options,
        )

    def resubstitute(
        self,
        css: str,
        colors: Mapping[str, str],
        theme_variables: list[str],
        *,
        palette_shades: bool = False,
    ) -> str:
        """Replace literal theme colors in *css* with variable references."""
        variable_for = {marker_name(v): v for v in theme_variables}
        for marker, color in colors.items():
            variable = variable_for.get(marker, SIGIL + marker)
            replacement = variable
            if palette_shades and SHADE_RE.match(variable):
                replacement = palette_shade(variable) or variable
            css = _color_pattern(color).sub(lambda _m: replacement, css)
        return css

    def supporting_variables(
        self,
        css: str,
        theme_variables: list[str],
        variables: Mapping[str, str],
        replacement: Mapping[str, str] | None = None,
    ) -> list[str]:
        """Non-theme variables needed to evaluate the theme declarations and *css*.

        A theme variable's references are taken from the value that will be
        declared, the *replacement* one when given.
        """
        replacement = replacement or {}
        pending: list[str] = referenced_variables(css)
        for name in theme_variables:
            pending.extend(referenced_variables(replacement.get(name, variables[name])))
        found: list[str] = []
        while pending:
            name = pending.pop(0)
            if name in found or name in theme_variables or name not in variables:
                continue
            found.append(name)
            pending.extend(referenced_variables(variables[name]))
        return found

    def finalize(
        self,
        css: str,
        theme_variables: list[str],
        variables: Mapping[str, str],
        replacement: Mapping[str, str] | None = None,
    ) -> str:
        """Prepend theme declarations, drop blank and duplicate lines."""
        replacement = replacement or {}
        supporting = self.supporting_variables(css, theme_variables, variables, replacement)
        declarations = "\n".join(f"{n}: {variables[n]};" for n in supporting)
        body = f"{declarations}\n{css}"

        for name in reversed(theme_variables):
            body = re.sub(
                rf"^[ \t]*{re.escape(name)}[ \t]*:.*;[ \t]*$", "", body, flags=re.MULTILINE
            )
            value = replacement.get(name, variables[name])
            body = f"{name}: {value};\n{body}"

        return "\n".join(_unique_lines(body)) + "\n"


_default_cache = ThemeCache()


def generate_theme(
    config: ThemeConfig | Mapping[str, Any],
    *,
    compiler: Compiler | None = None,
    cache: ThemeCache | None = None,
    module_root: str | None = None,
) -> str:
    """Generate the theme stylesheet described by *config*.

    *config* may be a ThemeConfig or a mapping using the option names of the
    JavaScript API (``stylesDir``, ``varFile``, ...). Results are cached in a
    process-wide slot unless *cache* is given.
    """
    if not isinstance(config, ThemeConfig):
        config = ThemeConfig.from_mapping(config)
    generator = ThemeGenerator(
        compiler=compiler,
        cache=cache if cache is not None else _default_cache,
        module_root=module_root,
    )
    return generator.generate(config)

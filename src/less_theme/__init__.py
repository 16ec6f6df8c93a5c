"""less_theme: derive runtime-overridable theme stylesheets from LESS sources."""
from __future__ import annotations

from less_theme._version import __version__
from less_theme.config import ThemeConfig
from less_theme.errors import ConfigError, ThemeError
from less_theme.compiler import BundleError, CompilationError, Compiler, LesscCompiler
from less_theme.theme import ThemeCache, ThemeGenerator, generate_theme
from less_theme.variables import build_variable_map, get_less_vars, is_valid_color, random_color

__all__ = [
    "__version__",
    "ThemeConfig",
    "ThemeError",
    "ConfigError",
    "BundleError",
    "CompilationError",
    "Compiler",
    "LesscCompiler",
    "ThemeCache",
    "ThemeGenerator",
    "generate_theme",
    "build_variable_map",
    "get_less_vars",
    "is_valid_color",
    "random_color",
]

"""Reduce a compiled stylesheet to the declarations painted by theme colors.

Input::

    .body {
      font-family: 'Lato';
      background: #1890ff;
      color: #000;
      padding: 0;
    }

Output, with ``#1890ff`` as the only theme color::

    .body {background: #1890ff;}

At-rules and comments are dropped wholesale. A declaration survives only if
its property is paint related, its value looks like a color and the value
contains one of the theme color literals. Rules left empty are dropped.
"""

from __future__ import annotations

from typing import Iterable

from less_theme.stylesheet.model import Declaration, Rule, Stylesheet
from less_theme.stylesheet.parser import parse_stylesheet

__all__ = [
    "COLOR_PROPERTIES",
    "PALETTE_PROBE_PREFIX",
    "RuleReducer",
    "is_color_declaration",
    "reduce_css",
]

COLOR_PROPERTIES = ("color", "background", "border", "box-shadow", "outline", "stroke")
COLOR_VALUE_MARKERS = ("#", "rgb", "hsl")

# Helper selectors emitted by the palette mixins of the variable files.
PALETTE_PROBE_PREFIX = ".main-color .palatte-"


def is_color_declaration(decl: Declaration) -> bool:
    prop = decl.prop.lower()
    if not any(p in prop for p in COLOR_PROPERTIES):
        return False
    return any(m in decl.value for m in COLOR_VALUE_MARKERS)


class RuleReducer:
    """Strip a Stylesheet down to rules that use *theme_values*."""

    def __init__(self, theme_values: Iterable[str]) -> None:
        self.theme_values = tuple(v for v in theme_values if v)

    def is_theme_declaration(self, decl: Declaration) -> bool:
        if not is_color_declaration(decl):
            return False
        return any(v in decl.value for v in self.theme_values)

    def _clean_rule(self, rule: Rule) -> bool:
        """Drop unthemed declarations from *rule*; return True if it should stay."""
        if rule.selector.startswith(PALETTE_PROBE_PREFIX):
            return False
        rule.nodes = [
            n for n in rule.nodes
            if isinstance(n, Declaration) and self.is_theme_declaration(n)
        ]
        return bool(rule.nodes)

    def reduce(self, stylesheet: Stylesheet) -> Stylesheet:
        """Reduce *stylesheet* in place and return it."""
        # At-rules go with their children; bare declarations and comments at
        # the top level have nothing to theme.
        stylesheet.nodes = [
            n for n in stylesheet.nodes
            if isinstance(n, Rule) and self._clean_rule(n)
        ]
        return stylesheet


def reduce_css(css: str, theme_values: Iterable[str]) -> str:
    """Parse, reduce and serialize *css* (one rule per line)."""
    stylesheet = parse_stylesheet(css)
    return RuleReducer(theme_values).reduce(stylesheet).to_css()

"""Marker probes: ask the compiler what color each theme variable resolves to.

For every theme variable a one-declaration rule is generated::

    .primary-color { color: @primary-color; }

Compiling it after the variable declarations yields the literal color::

    .primary-color {
      color: #1890ff;
    }
"""

from __future__ import annotations

import re
from typing import Iterable

__all__ = ["build_probe", "extract_marker_colors", "marker_name"]

_MARKER_RE = re.compile(r"\.([a-zA-Z0-9_-]+)\s*\{\s*color:\s*([^;\n]+);")
_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")


def marker_name(variable: str) -> str:
    """``@primary-color`` -> ``primary-color``."""
    return re.sub(r"['\"]", "", variable).lstrip("@")


def build_probe(variables: Iterable[str]) -> str:
    return "\n".join(f".{marker_name(v)} {{ color: {v}; }}" for v in variables)


def extract_marker_colors(css: str) -> dict[str, str]:
    """Map marker class names to the literal colors compiled for them.

    Only hex and ``rgba(...)`` values are kept. When a marker appears more
    than once the first occurrence wins.
    """
    colors: dict[str, str] = {}
    for match in _MARKER_RE.finditer(_COMMENT_RE.sub("", css)):
        name, value = match.group(1), match.group(2).strip()
        if not (value.startswith("#") or value.startswith("rgba")):
            continue
        colors.setdefault(name, value)
    return colors

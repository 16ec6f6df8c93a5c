"""Line-oriented parsing of LESS variable declarations.

Only single-line declarations are recognised::

    @primary-color: #1890ff;
    @link-color: @primary-color;
    @shadow-1: 0 2px 8px fade(@black, 15%);

Multi-line values and declarations nested in mixins do not match and are
skipped without error.
"""

from __future__ import annotations

import re
from typing import Mapping

__all__ = [
    "build_variable_map",
    "get_less_vars",
    "merge_variable_maps",
    "referenced_variables",
    "resolve_variable",
]

SIGIL = "@"

# The colon must directly follow the name, which keeps at-rules such as
# ``@media (max-width: 575px) {`` out.
_DECLARATION_RE = re.compile(r"^(@[a-zA-Z0-9_'-]+)\s*:[ ]{1,}(.*);")

# Permissive scan used for simple variable files.
_LOOSE_DECLARATION_RE = re.compile(r"@(.*:[^;]*)")

_REFERENCE_RE = re.compile(r"@\{?([a-zA-Z0-9_-]+)\}?")


def build_variable_map(source: str) -> dict[str, str]:
    """Parse ``@name: value;`` lines from *source* into a name to value map.

    Later declarations of the same name overwrite earlier ones.
    """
    variables: dict[str, str] = {}
    for line in source.split("\n"):
        if not line.startswith(SIGIL) or ":" not in line:
            continue
        match = _DECLARATION_RE.match(line)
        if match is None:
            continue
        name, value = match.group(1), match.group(2)
        variables[name] = value
    return variables


def get_less_vars(source: str) -> dict[str, str]:
    """Scan *source* for everything from ``@`` up to ``;``.

    Unlike :func:`build_variable_map` this accepts declarations that are not
    at the start of a line and names without a dash. Quotes are stripped from
    names.
    """
    variables: dict[str, str] = {}
    for match in _LOOSE_DECLARATION_RE.finditer(source):
        name, _, value = match.group(0).partition(":")
        name = re.sub(r"['\"]+", "", name).strip()
        variables[name] = value.strip()
    return variables


def merge_variable_maps(*maps: Mapping[str, str]) -> dict[str, str]:
    """Merge maps left to right; later maps win on collisions."""
    merged: dict[str, str] = {}
    for mapping in maps:
        merged.update(mapping)
    return merged


def referenced_variables(value: str) -> list[str]:
    """Return the variable names referenced by *value*, in order, without duplicates.

    Both ``@name`` and the interpolation form ``@{name}`` are recognised.
    """
    names: list[str] = []
    for match in _REFERENCE_RE.finditer(value):
        name = SIGIL + match.group(1)
        if name not in names:
            names.append(name)
    return names


def resolve_variable(name: str, variables: Mapping[str, str]) -> str | None:
    """Follow a chain of plain variable aliases down to its value.

    ``@link-color: @theme-color; @theme-color: #1890ff;`` resolves
    ``@link-color`` to ``#1890ff``. Values that are not a bare reference
    (function calls, lists) are returned as they are. Returns None for
    unknown names.
    """
    seen: set[str] = set()
    value = variables.get(name)
    while value is not None and value in variables and value not in seen:
        seen.add(value)
        value = variables[value]
    return value

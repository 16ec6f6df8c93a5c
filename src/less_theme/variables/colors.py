"""Color value helpers."""

from __future__ import annotations

import random
import re

__all__ = ["is_valid_color", "palette_shade", "random_color", "SHADE_RE"]

_LESS_COLOR_FUNCTION_RE = re.compile(r"colorPalette|fade|shade|tint")
_FUNCTIONAL_COLOR_RE = re.compile(
    r"^(rgb|hsl)a?\((\d+%?(deg|rad|grad|turn)?[,\s]+){2,3}[\s/]*[\d.]+%?\)$",
    re.IGNORECASE,
)

# ``@primary-6`` -> ("@primary", "6")
SHADE_RE = re.compile(r"^(.*)-(\d+)$")

# Shade families whose base color is not simply the prefix name.
_SHADE_BASES = {
    "@primary": "@primary-color",
    "@theme": "@theme-color",
}


def is_valid_color(value: str | None) -> bool:
    """Return True if *value* looks like a color.

    Hex colors of 3, 4, 6 or 8 digits, ``rgb()/rgba()/hsl()/hsla()`` and LESS
    color functions are accepted. Anything containing ``px`` is not a color.
    """
    if not value or "px" in value:
        return False
    if _LESS_COLOR_FUNCTION_RE.search(value):
        return True
    if value.startswith("#"):
        digits = value[1:]
        if len(digits) not in (3, 4, 6, 8):
            return False
        try:
            int(digits, 16)
        except ValueError:
            return False
        return True
    return _FUNCTIONAL_COLOR_RE.match(value) is not None


def random_color() -> str:
    return "#" + format(random.randrange(0x1000000), "06x")


def palette_shade(name: str) -> str | None:
    """Rewrite a numbered shade variable into a colorPalette() call.

    ``@primary-6`` becomes ``color(~`colorPalette("@{primary-color}", 6)`)``.
    Returns None when *name* carries no shade number.
    """
    match = SHADE_RE.match(name)
    if match is None:
        return None
    family, number = match.group(1), match.group(2)
    base = _SHADE_BASES.get(family, family)
    return 'color(~`colorPalette("@{' + base.lstrip("@") + '}", ' + number + ")`)"

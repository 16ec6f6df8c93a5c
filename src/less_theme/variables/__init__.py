from less_theme.variables.parser import (
    build_variable_map,
    get_less_vars,
    merge_variable_maps,
    referenced_variables,
    resolve_variable,
)
from less_theme.variables.colors import is_valid_color, palette_shade, random_color

__all__ = [
    "build_variable_map",
    "get_less_vars",
    "merge_variable_maps",
    "referenced_variables",
    "resolve_variable",
    "is_valid_color",
    "palette_shade",
    "random_color",
]

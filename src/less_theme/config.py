from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping

from less_theme.errors import ConfigError

DEFAULT_THEME_VARIABLE = "@primary-color"
DEFAULT_COLOR_FILE_THEME_REGEX = r"^@primary-\d+$"
DEFAULT_INCLUDE = ("**/*.less",)

# Keys accepted by the JavaScript generateTheme() API.
_CAMEL_KEYS = {
    "stylesDir": "styles_dir",
    "varFile": "var_file",
    "mainLessFile": "main_less_file",
    "outputFilePath": "output_file_path",
    "themeVariables": "theme_variables",
    "excludeVariables": "exclude_variables",
    "colorFile": "color_file",
    "colorFileThemeRegex": "color_file_theme_regex",
    "themeReplacement": "theme_replacement",
    "defaultThemeVariable": "default_theme_variable",
    "paletteShades": "palette_shades",
}


@dataclass(frozen=True)
class ThemeConfig:
    styles_dir: str
    var_file: str
    main_less_file: str | None = None
    output_file_path: str | None = None
    theme_variables: tuple[str, ...] | None = None
    exclude_variables: tuple[str, ...] = ()
    include: tuple[str, ...] = DEFAULT_INCLUDE
    options: dict[str, Any] = field(default_factory=dict)
    color_file: str | None = None
    color_file_theme_regex: str = DEFAULT_COLOR_FILE_THEME_REGEX
    theme_replacement: dict[str, str] = field(default_factory=dict)
    default_theme_variable: str = DEFAULT_THEME_VARIABLE
    palette_shades: bool = False

    def __post_init__(self) -> None:
        if not self.styles_dir:
            raise ConfigError("styles_dir is required")
        if not self.var_file:
            raise ConfigError("var_file is required")
        # Sequences from JSON or click arrive as lists.
        if self.theme_variables is not None and not isinstance(self.theme_variables, tuple):
            object.__setattr__(self, "theme_variables", tuple(self.theme_variables))
        if not isinstance(self.exclude_variables, tuple):
            object.__setattr__(self, "exclude_variables", tuple(self.exclude_variables))
        if isinstance(self.include, str):
            object.__setattr__(self, "include", (self.include,))
        elif not isinstance(self.include, tuple):
            object.__setattr__(self, "include", tuple(self.include) or DEFAULT_INCLUDE)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ThemeConfig:
        """Build a config from snake_case or camelCase keys.

        Unknown keys raise ConfigError so typos do not silently fall back to
        defaults.
        """
        names = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in names:
                raise ConfigError(f"Unknown theme option: {key!r}")
            if value is None:
                continue
            kwargs[name] = value
        for required in ("styles_dir", "var_file"):
            if required not in kwargs:
                raise ConfigError(f"{required} is required")
        return cls(**kwargs)

    def with_replacement(self, replacement: Mapping[str, str]) -> ThemeConfig:
        """Return a copy whose final declarations use *replacement* values."""
        merged = {**self.theme_replacement, **replacement}
        return dataclasses.replace(self, theme_replacement=merged)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

"""Error hierarchy for theme generation."""
from __future__ import annotations


class ThemeError(Exception):
    """Base error for all less_theme errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigError(ThemeError):
    """The theme configuration is missing a required setting."""

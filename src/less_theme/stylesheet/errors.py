"""Stylesheet parser error types."""
from __future__ import annotations

from less_theme.errors import ThemeError


class StylesheetParseError(ThemeError):
    """Raised when compiled CSS cannot be parsed into a rule tree."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

"""Compiler and bundler error types."""
from __future__ import annotations

from less_theme.errors import ThemeError


class CompilationError(ThemeError):
    """The LESS compiler rejected its input.

    ``diagnostic`` holds the compiler's own message, unmodified.
    """

    def __init__(
        self,
        message: str,
        *,
        diagnostic: str = "",
        filename: str | None = None,
        exit_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.diagnostic = diagnostic
        self.filename = filename
        self.exit_code = exit_code


class CompilerNotFoundError(CompilationError):
    """The compiler executable could not be started."""


class BundleError(ThemeError):
    """An ``@import`` target could not be read while bundling."""

    def __init__(self, message: str, *, path: str = "", cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.path = path

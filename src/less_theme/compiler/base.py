"""Base protocol for LESS compilers."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class Compiler(Protocol):
    """Turns LESS source into plain CSS.

    Implementations raise :class:`~less_theme.compiler.errors.CompilationError`
    when the source cannot be compiled.
    """

    def compile(
        self,
        source: str,
        *,
        paths: Sequence[str] = (),
        filename: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str: ...

"""Flatten ``@import`` chains into a single LESS source.

Imports of ``.less`` files are inlined recursively, each file at most once
unless imported with the ``multiple`` option. Imports that LESS treats
specially (``reference``, ``optional``, ``css``, ``inline``, plain ``.css``
files, ``url(...)`` and media-qualified imports) are kept as statements with
their path made absolute so the compiler can still find them.

Package imports use a ``~`` prefix (``@import "~antd/lib/style/index";``) and
resolve against ``<module_root>/node_modules``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from less_theme.compiler.errors import BundleError

__all__ = ["Bundler", "bundle_file", "bundle_source", "resolve_npm_imports"]

DEFAULT_NPM_PREFIX = "~"

_IMPORT_RE = re.compile(
    r"""
    @import\s*
    (?:\((?P<options>[^)]*)\)\s*)?        # (reference), (css, optional) ...
    (?P<url>url\(\s*)?
    (?P<quote>["'])(?P<path>[^"']+)(?P=quote)
    (?(url)\s*\))
    \s*(?P<media>[^;]*?)\s*;
    """,
    re.VERBOSE,
)

_KEEP_OPTIONS = {"reference", "optional", "css", "inline"}


def _in_line_comment(source: str, pos: int) -> bool:
    line_start = source.rfind("\n", 0, pos) + 1
    return "//" in source[line_start:pos]


class Bundler:
    """Inline ``@import`` statements starting from a file or a source string."""

    def __init__(
        self,
        paths: Iterable[str] = (),
        module_root: str | None = None,
        npm_prefix: str = DEFAULT_NPM_PREFIX,
        skip: Iterable[str] = (),
    ) -> None:
        self._paths = [Path(p) for p in paths]
        self._module_root = Path(module_root) if module_root else Path.cwd()
        self._npm_prefix = npm_prefix
        self._skip = {Path(p).resolve() for p in skip}
        self._seen: set[Path] = set()

    def bundle_file(self, path: str | Path) -> str:
        file_path = Path(path).resolve()
        source = file_path.read_text(encoding="utf-8", errors="replace")
        self._seen.add(file_path)
        return self._inline(source, file_path.parent, stack=(file_path,))

    def bundle_source(self, source: str, base_dir: str | Path) -> str:
        return self._inline(source, Path(base_dir).resolve(), stack=())

    # --- internals ---

    def _candidates(self, raw: str, base_dir: Path) -> list[Path]:
        if self._npm_prefix and raw.startswith(self._npm_prefix):
            roots = [self._module_root / "node_modules"]
            raw = raw[len(self._npm_prefix):]
        elif Path(raw).is_absolute():
            roots = [Path("/")]
        else:
            roots = [base_dir, *self._paths]
        names = [raw] if Path(raw).suffix else [raw + ".less", raw]
        return [root / name for root in roots for name in names]

    def _locate(self, raw: str, base_dir: Path) -> Path | None:
        for candidate in self._candidates(raw, base_dir):
            if candidate.is_file():
                return candidate.resolve()
        return None

    def _inline(self, source: str, base_dir: Path, stack: tuple[Path, ...]) -> str:
        def replace(match: re.Match[str]) -> str:
            if _in_line_comment(source, match.start()):
                return match.group(0)

            raw = match.group("path")
            options = {o.strip() for o in (match.group("options") or "").split(",") if o.strip()}
            keep = (
                bool(options & _KEEP_OPTIONS)
                or match.group("url") is not None
                or bool(match.group("media"))
                or raw.endswith(".css")
                or "://" in raw
            )

            located = self._locate(raw, base_dir)
            if keep:
                if located is None:
                    return match.group(0)
                return match.group(0).replace(raw, str(located), 1)

            if located is None:
                raise BundleError(f"Cannot resolve import {raw!r} from {base_dir}", path=raw)
            if located in self._skip or located in stack:
                return ""
            if located in self._seen and "multiple" not in options:
                return ""
            self._seen.add(located)
            try:
                text = located.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                raise BundleError(f"Cannot read import {located}: {exc}", path=str(located), cause=exc) from exc
            return self._inline(text, located.parent, stack=(*stack, located))

        return _IMPORT_RE.sub(replace, source)


def bundle_file(
    path: str | Path,
    *,
    paths: Iterable[str] = (),
    module_root: str | None = None,
    skip: Iterable[str] = (),
) -> str:
    """Read *path* and return it with its ``@import`` chain inlined."""
    return Bundler(paths=paths, module_root=module_root, skip=skip).bundle_file(path)


def bundle_source(
    source: str,
    base_dir: str | Path,
    *,
    paths: Iterable[str] = (),
    module_root: str | None = None,
    skip: Iterable[str] = (),
) -> str:
    """Inline the imports of *source*, resolving relative paths from *base_dir*."""
    return Bundler(paths=paths, module_root=module_root, skip=skip).bundle_source(source, base_dir)


def resolve_npm_imports(
    source: str, module_root: str | Path, prefix: str = DEFAULT_NPM_PREFIX
) -> str:
    """Point ``~package/...`` imports at ``<module_root>/node_modules/package/...``."""
    node_modules = Path(module_root) / "node_modules"

    def replace(match: re.Match[str]) -> str:
        raw = match.group("path")
        if not raw.startswith(prefix) or _in_line_comment(source, match.start()):
            return match.group(0)
        target = (node_modules / raw[len(prefix):]).as_posix()
        return match.group(0).replace(raw, target, 1)

    return _IMPORT_RE.sub(replace, source)

"""LESS compiler backed by the ``lessc`` command line tool."""

from __future__ import annotations

import logging
import os
import re
import subprocess
from pathlib import Path
from typing import Any, Mapping, Sequence

from less_theme.compiler.bundler import DEFAULT_NPM_PREFIX, resolve_npm_imports
from less_theme.compiler.errors import CompilationError, CompilerNotFoundError

logger = logging.getLogger(__name__)

# Always on unless a caller sets them to False explicitly.
DEFAULT_OPTIONS: dict[str, Any] = {
    "js": True,
    "npm-import": True,
}

# JavaScript option names that differ from their lessc flag.
_FLAG_ALIASES = {
    "javascript-enabled": "js",
    "paths": "include-path",
    "modify-vars": "modify-var",
    "global-vars": "global-var",
}

# Flags that take an explicit on/off value instead of being bare switches.
_ON_OFF_FLAGS = {"strict-units", "strict-math"}

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _flag_name(key: str) -> str:
    name = _CAMEL_RE.sub("-", key).lower().lstrip("-")
    return _FLAG_ALIASES.get(name, name)


def merge_options(options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge caller *options* over :data:`DEFAULT_OPTIONS`.

    Keys are normalised to lessc flag names, so ``javascriptEnabled`` and
    ``js`` refer to the same setting. A caller value of None keeps the default.
    """
    merged = dict(DEFAULT_OPTIONS)
    for key, value in (options or {}).items():
        if value is None:
            continue
        merged[_flag_name(key)] = value
    return merged


def build_arguments(options: Mapping[str, Any]) -> list[str]:
    """Translate merged options into lessc command line flags."""
    args: list[str] = []
    for name, value in options.items():
        if name == "npm-import":
            continue  # handled before the source reaches lessc
        if name in _ON_OFF_FLAGS and isinstance(value, bool):
            args.append(f"--{name}={'on' if value else 'off'}")
            continue
        if value is False:
            continue
        if value is True:
            args.append(f"--{name}")
        elif isinstance(value, Mapping):
            for key, item in value.items():
                args.append(f"--{name}={key.lstrip('@')}={item}")
        elif isinstance(value, (list, tuple)):
            args.append(f"--{name}={os.pathsep.join(str(v) for v in value)}")
        else:
            args.append(f"--{name}={value}")
    return args


class LesscCompiler:
    """Compile LESS by piping source text into ``lessc -``.

    *module_root* is the directory whose ``node_modules`` satisfies
    ``~package`` imports; it defaults to the current working directory.
    """

    def __init__(
        self,
        executable: str | None = None,
        module_root: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.executable = executable or os.environ.get("LESSC", "lessc")
        self.module_root = module_root or os.getcwd()
        self.timeout = timeout

    def command(
        self, paths: Sequence[str] = (), options: Mapping[str, Any] | None = None
    ) -> list[str]:
        merged = merge_options(options)
        include = [str(p) for p in paths]
        if merged.get("npm-import"):
            include.append(str(Path(self.module_root) / "node_modules"))
        extra = merged.pop("include-path", None)
        if extra:
            include.extend(extra if isinstance(extra, (list, tuple)) else [str(extra)])
        cmd = [self.executable, *build_arguments(merged)]
        if include:
            cmd.append(f"--include-path={os.pathsep.join(include)}")
        cmd.append("-")
        return cmd

    def compile(
        self,
        source: str,
        *,
        paths: Sequence[str] = (),
        filename: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        merged = merge_options(options)
        if merged.get("npm-import"):
            prefix = merged["npm-import"] if isinstance(merged["npm-import"], str) else DEFAULT_NPM_PREFIX
            source = resolve_npm_imports(source, self.module_root, prefix)

        cmd = self.command(paths, options)
        cwd = str(Path(filename).resolve().parent) if filename else None
        logger.debug("Compiling %s: %s", filename or "<source>", " ".join(cmd))

        try:
            proc = subprocess.run(
                cmd,
                input=source.encode("utf-8"),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=cwd,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise CompilerNotFoundError(
                f"LESS compiler not found: {self.executable}",
                filename=filename,
                cause=exc,
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise CompilationError(
                f"lessc timed out after {self.timeout}s for {filename or '<source>'}",
                diagnostic=f"Timed out after {self.timeout} seconds",
                filename=filename,
                cause=exc,
            ) from exc

        stdout = proc.stdout.decode("utf-8", errors="replace")
        stderr = proc.stderr.decode("utf-8", errors="replace")
        if proc.returncode != 0:
            raise CompilationError(
                f"lessc failed for {filename or '<source>'}: {stderr.strip()}",
                diagnostic=stderr,
                filename=filename,
                exit_code=proc.returncode,
            )
        return stdout

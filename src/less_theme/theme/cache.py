"""Single-slot cache for generated themes."""

from __future__ import annotations

import hashlib
import json
import threading
from pathlib import Path
from typing import Iterable

from less_theme.config import ThemeConfig


def fingerprint(config: ThemeConfig, files: Iterable[str | Path | None]) -> str:
    """SHA-256 over the configuration and the path and content of *files*.

    Missing files hash as missing rather than raising, the pipeline reports
    them when it reads them.
    """
    digest = hashlib.sha256()
    digest.update(json.dumps(config.to_dict(), sort_keys=True, default=str).encode("utf-8"))
    paths = sorted({str(Path(f).resolve()) for f in files if f})
    for path in paths:
        digest.update(b"\0" + path.encode("utf-8") + b"\0")
        try:
            digest.update(Path(path).read_bytes())
        except OSError:
            digest.update(b"<missing>")
    return digest.hexdigest()


class ThemeCache:
    """Holds the output of the last successful run and the fingerprint of its inputs.

    Two runs in flight at once may both miss and both compute; the later
    one to finish owns the slot.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._fingerprint: str | None = None
        self._output: str | None = None

    def get(self, key: str) -> str | None:
        with self._lock:
            if key == self._fingerprint:
                return self._output
            return None

    def put(self, key: str, output: str) -> None:
        with self._lock:
            self._fingerprint = key
            self._output = output

    def clear(self) -> None:
        with self._lock:
            self._fingerprint = None
            self._output = None

    @property
    def fingerprint(self) -> str | None:
        return self._fingerprint

"""Directory writer: materialize sanitized entries under an output root.

Existing files are overwritten without warning. There is no rollback: if the
pipeline fails midway, files written so far stay on disk. Callers that need
atomicity should point this at a staging directory and rename on success.
"""

from __future__ import annotations

import logging
from pathlib import Path

from stackblitz_zip.logging import diag_level, get_logger
from stackblitz_zip.types import SanitizedEntry


def _is_within(base: Path, target: Path) -> bool:
    try:
        target.relative_to(base)
        return True
    except ValueError:
        return False


class DirectorySink:
    def __init__(
        self,
        root: Path,
        *,
        verbose: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.root = Path(root)
        self.written = 0
        self._log = logger or get_logger()
        self._level = diag_level(verbose)
        self._resolved_root: Path | None = None

    def _ensure_root(self) -> Path:
        if self._resolved_root is None:
            self.root.mkdir(parents=True, exist_ok=True)
            self._resolved_root = self.root.resolve()
        return self._resolved_root

    def add(self, entry: SanitizedEntry) -> None:
        base = self._ensure_root()
        target = (base / entry.path).resolve()
        # Sanitized paths cannot escape; a symlink already inside root could
        if not _is_within(base, target):
            raise RuntimeError(f"Entry escapes destination: {entry.path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(entry.contents, encoding="utf-8", newline="")
        self.written += 1
        self._log.log(self._level, f"Created file: {entry.path}")

    def close(self) -> Path:
        self._ensure_root()
        self._log.log(self._level, f"Project cloned to: {self.root} ({self.written} files)")
        return self.root

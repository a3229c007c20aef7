"""Endpoint and default limits.

Defaults can be tuned per host through environment variables; per-call
overrides go through :class:`stackblitz_zip.types.DownloadOptions`.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from typing import TypeVar

API_BASE = "https://stackblitz.com/api/projects"
EDIT_MARKER = "/edit/"

PROJECT_ID_RE = re.compile(r"[A-Za-z0-9_-]+")

# Substring match against the raw (unnormalized) path
EXCLUDED_PREFIXES: tuple[str, ...] = ("node_modules/", ".git/")


N = TypeVar("N", int, float)


def _env_number(name: str, default: N, cast: Callable[[str], N] = int) -> N:
    """Read a numeric env var, returning *default* on missing/invalid/non-positive."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        parsed = cast(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


DEFAULT_TIMEOUT: float = _env_number("STACKBLITZ_ZIP_TIMEOUT", 30.0, float)  # seconds
DEFAULT_MAX_FILE_SIZE: int = _env_number("STACKBLITZ_ZIP_MAX_FILE_SIZE", 10 * 1024 * 1024)
DEFAULT_MAX_TOTAL_SIZE: int = _env_number("STACKBLITZ_ZIP_MAX_TOTAL_SIZE", 100 * 1024 * 1024)


def project_url(project_id: str) -> str:
    return f"{API_BASE}/{project_id}?include_files=true"

"""Path sanitization for untrusted remote file trees.

Guards against:
- Zip Slip (../ traversal): escaping segments are flattened onto the root
- Absolute paths: leading slashes are dropped
- Vendored/VCS trees: anything under node_modules/ or .git/ is skipped

Rejections are skips, not errors; an untrusted tree may legitimately contain
entries we refuse to materialize.
"""

from __future__ import annotations

from stackblitz_zip.config import EXCLUDED_PREFIXES


def normalize_path(raw: str) -> str:
    """Collapse *raw* into a relative POSIX path that cannot leave the root.

    A ``..`` with nothing left to pop is dropped rather than rejected, so
    ``../../etc/passwd`` becomes ``etc/passwd`` and ``a/../../b`` becomes ``b``.
    """
    parts: list[str] = []
    for segment in raw.split("/"):
        if segment in {"", "."}:
            continue
        if segment == "..":
            if parts:
                parts.pop()
            continue
        parts.append(segment)
    return "/".join(parts)


def is_excluded(raw: str) -> bool:
    return any(prefix in raw for prefix in EXCLUDED_PREFIXES)


def is_safe_relative(path: str) -> bool:
    return bool(path) and not path.startswith("/") and ".." not in path.split("/")


def sanitize_path(raw: str) -> str | None:
    """Return the normalized path for *raw*, or ``None`` if the entry must be skipped."""
    if is_excluded(raw):
        return None
    normalized = normalize_path(raw)
    if not is_safe_relative(normalized):
        return None
    return normalized

"""In-memory zip packaging.

Builds a normalized zip archive from sanitized entries:
- arcnames are the sanitized relative paths, contents written as UTF-8
- fixed timestamps and permissions, so identical input gives identical bytes
- nothing is returned unless every entry was accepted

The finished :class:`ZipArtifact` materializes as raw bytes, a :class:`Blob`,
an ``httpx.Response`` or a file on disk, and carries its SHA-256 digest.
"""

from __future__ import annotations

import hashlib
import io
import logging
import zipfile
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

import httpx

from stackblitz_zip.logging import diag_level, get_logger
from stackblitz_zip.types import SanitizedEntry

ZIP_MIME = "application/zip"
_EPOCH = (1980, 1, 1, 0, 0, 0)
_FILE_MODE = 0o100644


def _sha256_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


@dataclass(frozen=True)
class Blob:
    """Binary payload plus its media type, for hand-off to browsers or uploads."""

    data: bytes
    content_type: str = ZIP_MIME

    @property
    def size(self) -> int:
        return len(self.data)

    def open(self) -> io.BytesIO:
        return io.BytesIO(self.data)


@dataclass(frozen=True)
class ZipArtifact:
    project_id: str
    data: bytes
    names: tuple[str, ...]

    @property
    def filename(self) -> str:
        return f"{self.project_id}.zip"

    @cached_property
    def sha256(self) -> str:
        return _sha256_bytes(self.data)

    def to_bytes(self) -> bytes:
        return self.data

    def to_blob(self) -> Blob:
        return Blob(self.data)

    def to_response(self) -> httpx.Response:
        return httpx.Response(
            200,
            headers={
                "Content-Type": ZIP_MIME,
                "Content-Disposition": f'attachment; filename="{self.filename}"',
            },
            content=self.data,
        )

    def write_to(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.data)
        return path


class ZipSink:
    """Collect entries, then build the archive in one pass on :meth:`close`.

    Two raw paths may normalize to the same name; the later contents win and
    the name keeps its first position, matching what the directory sink
    leaves on disk.
    """

    def __init__(
        self,
        project_id: str,
        *,
        compression: int = zipfile.ZIP_DEFLATED,
        verbose: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.project_id = project_id
        self.compression = compression
        self._entries: dict[str, SanitizedEntry] = {}
        self._log = logger or get_logger()
        self._level = diag_level(verbose)

    def add(self, entry: SanitizedEntry) -> None:
        if entry.path in self._entries:
            self._log.log(self._level, f"Replacing duplicate entry: {entry.path}")
        self._entries[entry.path] = entry

    def close(self) -> ZipArtifact:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=self.compression) as z:
            for entry in self._entries.values():
                info = zipfile.ZipInfo(entry.path, date_time=_EPOCH)
                info.compress_type = self.compression
                info.external_attr = _FILE_MODE << 16
                z.writestr(info, entry.contents.encode("utf-8"))

        artifact = ZipArtifact(
            project_id=self.project_id,
            data=buffer.getvalue(),
            names=tuple(self._entries),
        )
        self._log.log(
            self._level,
            f"Packed {len(artifact.names)} files into {artifact.filename}",
            extra={"bytes": len(artifact.data), "sha256": artifact.sha256},
        )
        return artifact

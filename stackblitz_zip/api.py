"""Public entry points.

Every function takes either a :class:`DownloadOptions` or the same fields as
keyword arguments, and runs the shared fetch → sanitize → guard pipeline into
the matching sink:

>>> from stackblitz_zip.api import download_to_file, parse_url
>>> download_to_file(project_id=parse_url("https://stackblitz.com/edit/nuxt-starter-k7spa3r4"))
PosixPath('.../nuxt-starter-k7spa3r4.zip')
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx

from stackblitz_zip.core import run
from stackblitz_zip.logging import diag_level, get_logger
from stackblitz_zip.package.directory import DirectorySink
from stackblitz_zip.package.zip import Blob, ZipArtifact, ZipSink
from stackblitz_zip.types import DownloadOptions
from stackblitz_zip.url import parse_url

__all__ = [
    "clone_project",
    "download_archive",
    "download_to_blob",
    "download_to_buffer",
    "download_to_file",
    "download_to_response",
    "parse_url",
]


def _options(options: DownloadOptions | None, overrides: dict[str, Any]) -> DownloadOptions:
    if options is None:
        return DownloadOptions(**overrides)
    if overrides:
        return options.model_copy(update=overrides)
    return options


def download_archive(
    options: DownloadOptions | None = None,
    *,
    client: httpx.Client | None = None,
    **overrides: Any,
) -> ZipArtifact:
    opts = _options(options, overrides)
    sink = ZipSink(opts.project_id, verbose=opts.verbose)
    return run(opts, sink, client=client)


def download_to_response(
    options: DownloadOptions | None = None,
    *,
    client: httpx.Client | None = None,
    **overrides: Any,
) -> httpx.Response:
    """Return the archive as a 200 response with zip attachment headers."""
    return download_archive(options, client=client, **overrides).to_response()


def download_to_buffer(
    options: DownloadOptions | None = None,
    *,
    client: httpx.Client | None = None,
    **overrides: Any,
) -> bytes:
    return download_archive(options, client=client, **overrides).to_bytes()


def download_to_blob(
    options: DownloadOptions | None = None,
    *,
    client: httpx.Client | None = None,
    **overrides: Any,
) -> Blob:
    return download_archive(options, client=client, **overrides).to_blob()


def download_to_file(
    options: DownloadOptions | None = None,
    *,
    client: httpx.Client | None = None,
    **overrides: Any,
) -> Path:
    """Write the archive to ``output_path`` (default ``<cwd>/<project_id>.zip``)."""
    opts = _options(options, overrides)
    artifact = download_archive(opts, client=client)
    target = opts.output_path or Path.cwd() / artifact.filename
    artifact.write_to(target)
    get_logger().log(
        diag_level(opts.verbose), f"Project downloaded to: {target}", extra={"sha256": artifact.sha256}
    )
    return target


def clone_project(
    options: DownloadOptions | None = None,
    *,
    client: httpx.Client | None = None,
    **overrides: Any,
) -> Path:
    """Write every accepted file under ``output_path`` (default ``<cwd>/<project_id>``).

    Not atomic: a failure partway leaves the files written so far in place.
    """
    opts = _options(options, overrides)
    root = opts.output_path or Path.cwd() / opts.project_id
    return run(opts, DirectorySink(root, verbose=opts.verbose), client=client)

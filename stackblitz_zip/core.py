"""Pipeline orchestration: fetch → sanitize → size guard → sink."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TypeVar

import httpx

from stackblitz_zip.fetch import fetch_project
from stackblitz_zip.logging import diag_level, get_logger
from stackblitz_zip.package.base import Sink
from stackblitz_zip.security.limits import SizeGuard
from stackblitz_zip.security.paths import sanitize_path
from stackblitz_zip.types import DownloadOptions, ProjectTree, SanitizedEntry

T = TypeVar("T")


def iter_entries(
    tree: ProjectTree,
    options: DownloadOptions,
    logger: logging.Logger | None = None,
) -> Iterator[SanitizedEntry]:
    """Yield the entries of *tree* that may be materialized, in API order.

    Unsafe or excluded paths are skipped. Size violations raise and end the
    iteration; whatever the caller already consumed is not rolled back.
    """
    log = logger or get_logger()
    level = diag_level(options.verbose)
    guard = SizeGuard(options.max_file_size, options.max_total_size)

    for raw_path, remote in tree.items():
        if not remote.is_file:
            log.debug(f"Skipping non-file entry: {raw_path} ({remote.type or 'untyped'})")
            continue
        path = sanitize_path(raw_path)
        if path is None:
            log.log(level, f"Skipping suspicious file path: {raw_path}")
            continue
        contents = remote.contents or ""
        size = guard.accept(path, contents)
        log.log(level, f"Adding file: {path}", extra={"bytes": size})
        yield SanitizedEntry(path=path, contents=contents, size=size)


def run(
    options: DownloadOptions,
    sink: Sink[T],
    *,
    client: httpx.Client | None = None,
    logger: logging.Logger | None = None,
) -> T:
    log = logger or get_logger()
    tree = fetch_project(
        options.project_id,
        timeout=options.timeout,
        verbose=options.verbose,
        client=client,
        logger=log,
    )
    for entry in iter_entries(tree, options, log):
        sink.add(entry)
    return sink.close()

"""Project fetcher: one bounded-time GET against the StackBlitz project API.

Behavior:
- Validate the identifier before it is interpolated into the URL
- Run the request under a :class:`Deadline`; expiry is a timeout, not a network error
- Non-2xx is a :class:`RemoteError`; an unusable body is a :class:`MalformedResponseError`
- No retries at this layer
"""

from __future__ import annotations

import contextlib
import logging

import httpx

from stackblitz_zip.cancellation import Deadline
from stackblitz_zip.config import PROJECT_ID_RE, project_url
from stackblitz_zip.errors import (
    InvalidIdentifierError,
    MalformedResponseError,
    NetworkError,
    RemoteError,
    RequestTimeoutError,
)
from stackblitz_zip.logging import diag_level, get_logger
from stackblitz_zip.types import ProjectTree
from stackblitz_zip.validator import parse_project_tree

USER_AGENT = "stackblitz-zip/0.1.0"


def validate_project_id(project_id: str) -> str:
    if not PROJECT_ID_RE.fullmatch(project_id):
        raise InvalidIdentifierError(project_id)
    return project_id


def new_client() -> httpx.Client:
    return httpx.Client(follow_redirects=True, headers={"User-Agent": USER_AGENT})


def _read_body(response: httpx.Response, deadline: Deadline, timeout: float) -> bytes:
    body = bytearray()
    for chunk in response.iter_bytes():
        if deadline.expired():
            raise RequestTimeoutError(timeout)
        body.extend(chunk)
    return bytes(body)


def fetch_project(
    project_id: str,
    *,
    timeout: float,
    verbose: bool = False,
    client: httpx.Client | None = None,
    logger: logging.Logger | None = None,
) -> ProjectTree:
    """Fetch the file tree of *project_id*.

    Parameters
    ----------
    project_id: str
        Identifier as extracted from the edit URL; validated here.
    timeout: float
        Overall deadline in seconds covering connect, headers and body.
    verbose: bool
        Emit diagnostics at INFO instead of DEBUG.
    client: httpx.Client | None
        Reuse a caller-owned client (never closed here). A private one is
        created otherwise.

    Returns
    -------
    ProjectTree
        Raw path -> entry, in API order. Paths are still untrusted.
    """
    log = logger or get_logger()
    level = diag_level(verbose)
    validate_project_id(project_id)

    url = project_url(project_id)
    log.log(level, f"Fetching project: {url}", extra={"project_id": project_id})

    owned = contextlib.nullcontext(client) if client is not None else new_client()
    try:
        with owned as http, Deadline(timeout) as deadline:
            with http.stream("GET", url, timeout=deadline.remaining()) as r:
                # Headers that arrive late are a timeout, whatever their status
                if deadline.expired():
                    raise RequestTimeoutError(timeout)
                if not r.is_success:
                    raise RemoteError(r.status_code, r.reason_phrase)
                body = _read_body(r, deadline, timeout)
    except httpx.TimeoutException as exc:
        raise RequestTimeoutError(timeout) from exc
    except httpx.DecodingError as exc:
        raise MalformedResponseError(f"Response body could not be decoded: {exc}") from exc
    except httpx.RequestError as exc:
        raise NetworkError(f"Failed to fetch project: {exc}") from exc

    tree = parse_project_tree(body)
    log.log(level, f"Found {len(tree)} files in project", extra={"project_id": project_id})
    return tree

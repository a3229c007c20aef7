"""Project identifier extraction from StackBlitz edit URLs.

Examples:
- https://stackblitz.com/edit/nuxt-starter-k7spa3r4
- https://stackblitz.com/edit/nuxt-starter-k7spa3r4?file=app.vue
- https://stackblitz.com/edit/nuxt-starter-k7spa3r4#section
"""

from __future__ import annotations

import re

from stackblitz_zip.config import EDIT_MARKER, PROJECT_ID_RE
from stackblitz_zip.errors import InvalidUrlError

_SEGMENT_END = re.compile(r"[/?#]")


def parse_url(url: str) -> str:
    """Return the segment right after ``/edit/``, cut at the first ``/``, ``?`` or ``#``.

    The identifier is returned verbatim; whitelist validation happens in the fetcher.
    """
    _, marker, rest = url.partition(EDIT_MARKER)
    if not marker:
        raise InvalidUrlError(url)
    project_id = _SEGMENT_END.split(rest, 1)[0]
    if not project_id:
        raise InvalidUrlError(url)
    return project_id


def resolve_project_id(source: str) -> str:
    # Bare identifiers are accepted as-is (CLI convenience)
    if EDIT_MARKER not in source and PROJECT_ID_RE.fullmatch(source):
        return source
    return parse_url(source)

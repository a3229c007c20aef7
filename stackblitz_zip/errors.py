"""Error taxonomy for the fetch → sanitize → package pipeline.

Every error is terminal for the invocation that raised it. Nothing here is
retried internally; callers that want retries wrap the public API.
"""

from __future__ import annotations


class StackBlitzZipError(Exception):
    """Base class for all errors raised by stackblitz_zip."""


class InvalidUrlError(StackBlitzZipError, ValueError):
    def __init__(self, url: str):
        super().__init__(f"Invalid StackBlitz URL: {url}")
        self.url = url


class InvalidIdentifierError(StackBlitzZipError, ValueError):
    def __init__(self, project_id: str):
        super().__init__(
            f"Invalid project ID {project_id!r}: must contain only alphanumeric "
            "characters, hyphens, and underscores"
        )
        self.project_id = project_id


class RequestTimeoutError(StackBlitzZipError):
    def __init__(self, timeout: float):
        super().__init__(f"Request timed out after {timeout:g}s")
        self.timeout = timeout


class NetworkError(StackBlitzZipError):
    """The request never produced a response (DNS, refused connection, ...)."""


class RemoteError(StackBlitzZipError):
    def __init__(self, status_code: int, reason: str = ""):
        detail = f"{status_code} {reason}".strip()
        super().__init__(f"Failed to fetch project: {detail}")
        self.status_code = status_code
        self.reason = reason


class MalformedResponseError(StackBlitzZipError):
    """The API answered, but not with a usable file tree."""


class FileTooLargeError(StackBlitzZipError):
    def __init__(self, path: str, size: int, limit: int):
        super().__init__(f"File {path} exceeds maximum size of {limit} bytes ({size} bytes)")
        self.path = path
        self.size = size
        self.limit = limit


class TotalSizeExceededError(StackBlitzZipError):
    def __init__(self, total: int, limit: int):
        super().__init__(f"Total project size exceeds maximum of {limit} bytes")
        self.total = total
        self.limit = limit

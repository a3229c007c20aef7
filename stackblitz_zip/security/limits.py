"""Byte budgets for a single download.

Sizes are measured on the UTF-8 encoding, not on character count, so
multi-byte text is charged what it will actually occupy on disk or in the
archive. Exceeding either ceiling aborts the whole operation.
"""

from __future__ import annotations

from stackblitz_zip.errors import FileTooLargeError, TotalSizeExceededError


def encoded_size(contents: str) -> int:
    return len(contents.encode("utf-8"))


class SizeGuard:
    """Running total across the ordered entries of one invocation."""

    def __init__(self, max_file_size: int, max_total_size: int):
        self.max_file_size = max_file_size
        self.max_total_size = max_total_size
        self.total = 0
        self.count = 0

    def accept(self, path: str, contents: str) -> int:
        """Charge *contents* against the budget and return its byte size.

        Raises
        ------
        FileTooLargeError
            The single entry is over ``max_file_size``.
        TotalSizeExceededError
            The running total is now over ``max_total_size``.
        """
        size = encoded_size(contents)
        if size > self.max_file_size:
            raise FileTooLargeError(path, size, self.max_file_size)
        self.total += size
        if self.total > self.max_total_size:
            raise TotalSizeExceededError(self.total, self.max_total_size)
        self.count += 1
        return size

"""Deadline-bounded cooperative cancellation for the project fetch.

A :class:`Deadline` arms a timer when entered and disarms it on exit. When
the timer fires it cancels the attached :class:`CancellationToken`; the
fetcher checks the token between body chunks and also hands the remaining
budget to httpx so that a stalled socket read cannot outlive the deadline.
"""

from __future__ import annotations

import threading
import time


class CancellationToken:
    """Thread-safe flag for cooperative cancellation."""

    def __init__(self) -> None:
        self._is_cancelled = threading.Event()

    def cancel(self) -> None:
        self._is_cancelled.set()

    def is_cancelled(self) -> bool:
        return self._is_cancelled.is_set()


class Deadline:
    """Single-use timer that cancels *token* after *seconds*.

    Examples:
        >>> with Deadline(5.0) as deadline:
        ...     client.get(url, timeout=deadline.remaining())
        ...     if deadline.expired():
        ...         ...
    """

    def __init__(self, seconds: float, token: CancellationToken | None = None) -> None:
        self.seconds = seconds
        self.token = token or CancellationToken()
        self._started: float | None = None
        self._timer: threading.Timer | None = None

    def __enter__(self) -> Deadline:
        self._started = time.monotonic()
        self._timer = threading.Timer(self.seconds, self.token.cancel)
        self._timer.daemon = True
        self._timer.start()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def remaining(self) -> float:
        if self._started is None:
            return self.seconds
        return max(0.0, self.seconds - (time.monotonic() - self._started))

    def expired(self) -> bool:
        return self.token.is_cancelled() or self.remaining() <= 0.0

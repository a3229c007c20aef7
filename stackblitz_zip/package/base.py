"""Sink contract shared by the archive and directory writers."""

from __future__ import annotations

from typing import Protocol, TypeVar

from stackblitz_zip.types import SanitizedEntry

T_co = TypeVar("T_co", covariant=True)


class Sink(Protocol[T_co]):
    """Terminal consumer of sanitized entries.

    ``add`` is called once per accepted entry, in API order. ``close`` is only
    called when every entry passed; its return value is the call's result.
    """

    def add(self, entry: SanitizedEntry) -> None: ...

    def close(self) -> T_co: ...

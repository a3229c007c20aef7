"""Shared Pydantic models and plain value types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

from stackblitz_zip import config


class RemoteFile(BaseModel):
    """One entry of the API's ``appFiles`` map. Untrusted.

    ``type`` is kept as sent; anything other than ``"file"`` is skipped
    downstream, so directories (and kinds we do not know) may omit or null
    their ``contents``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    type: str = ""
    contents: str | None = None
    full_path: str | None = Field(default=None, alias="fullPath")

    @property
    def is_file(self) -> bool:
        return self.type == "file"


# Raw path -> entry, in the order the API returned them
ProjectTree = dict[str, RemoteFile]


class DownloadOptions(BaseModel):
    """Per-call configuration bag. Build a fresh one for every invocation."""

    model_config = ConfigDict(frozen=True)

    project_id: str
    output_path: Path | None = None
    timeout: PositiveFloat = Field(default_factory=lambda: config.DEFAULT_TIMEOUT)
    max_file_size: PositiveInt = Field(default_factory=lambda: config.DEFAULT_MAX_FILE_SIZE)
    max_total_size: PositiveInt = Field(default_factory=lambda: config.DEFAULT_MAX_TOTAL_SIZE)
    verbose: bool = False


@dataclass(frozen=True)
class SanitizedEntry:
    path: str
    contents: str
    size: int

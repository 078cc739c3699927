"""Mirroring domain types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

from pydantic import BaseModel

EntryKind = Literal["directory", "file", "other"]


class RunLogSink(Protocol):
    """Anything that accepts one run-log line at a time."""

    def append(self, line: str) -> None: ...


class FileMetadata(BaseModel):
    mtime_ns: int
    atime_ns: int
    kind: EntryKind


class MetadataRead(BaseModel):
    """Outcome of a single metadata query: either metadata or the read error."""

    path: str
    metadata: FileMetadata | None = None
    error: str | None = None

    def mtime_or(self, default: int) -> int:
        """Modification time in nanoseconds, or ``default`` if the read failed."""
        return self.metadata.mtime_ns if self.metadata is not None else default


@dataclass(frozen=True)
class PendingDirectory:
    source: str
    destination: str


class MirrorStats(BaseModel):
    directories_visited: int = 0
    directories_created: int = 0
    files_copied: int = 0
    files_failed: int = 0
    files_up_to_date: int = 0
    entries_ignored: int = 0
    errors: int = 0

"""Metadata queries for paths in the source and destination trees.

Every query hits the filesystem; nothing is cached, so two reads of the same
path can disagree if the tree changes mid-run.
"""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

from .errors import os_error_reason
from .types import EntryKind, FileMetadata, MetadataRead

if TYPE_CHECKING:
    from .types import RunLogSink


def _kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISREG(mode):
        return "file"
    return "other"


def read_metadata(path: str, log: RunLogSink, *, follow_symlinks: bool = True) -> MetadataRead:
    """Stat ``path`` once. A failure is logged and returned, never raised."""
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as err:
        reason = os_error_reason(err)
        log.append(f"Could not read the metadata of '{path}' - {reason}")
        return MetadataRead(path=path, error=reason)

    return MetadataRead(
        path=path,
        metadata=FileMetadata(
            mtime_ns=st.st_mtime_ns,
            atime_ns=st.st_atime_ns,
            kind=_kind_from_mode(st.st_mode),
        ),
    )


def entry_kind(path: str, log: RunLogSink) -> EntryKind:
    """Classify ``path`` without following symlinks; unreadable paths are 'other'."""
    result = read_metadata(path, log, follow_symlinks=False)
    if result.metadata is None:
        return "other"
    return result.metadata.kind


def path_exists(path: str, *, follow_symlinks: bool = True) -> bool:
    if follow_symlinks:
        return os.path.exists(path)
    return os.path.lexists(path)

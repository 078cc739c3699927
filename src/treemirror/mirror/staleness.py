"""Decide whether a destination file is out of date."""

from __future__ import annotations

from typing import TYPE_CHECKING

from treemirror.infrastructure.config import EPOCH

from .metadata import path_exists, read_metadata

if TYPE_CHECKING:
    from .types import RunLogSink


def needs_copy(source_path: str, dest_path: str, log: RunLogSink) -> bool:
    """True if ``dest_path`` is missing or strictly older than ``source_path``.

    An unreadable modification time counts as the epoch on that side. With a
    readable destination, an unreadable source therefore never triggers a copy;
    an unreadable destination triggers one whenever the source is readable.
    """
    if not path_exists(dest_path):
        return True

    dest_mtime = read_metadata(dest_path, log).mtime_or(EPOCH)
    source_mtime = read_metadata(source_path, log).mtime_or(EPOCH)
    return dest_mtime < source_mtime

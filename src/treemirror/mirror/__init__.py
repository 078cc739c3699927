"""Incremental one-way directory mirroring."""

from __future__ import annotations

from .copier import copy_file, set_original_times
from .metadata import entry_kind, path_exists, read_metadata
from .paths import base_name, join_path
from .run_log import RunLog
from .staleness import needs_copy
from .types import (
    EntryKind,
    FileMetadata,
    MetadataRead,
    MirrorStats,
    PendingDirectory,
    RunLogSink,
)
from .walker import create_directory, mirror_tree

__all__ = [
    # copier
    "copy_file",
    "set_original_times",
    # metadata
    "entry_kind",
    "path_exists",
    "read_metadata",
    # paths
    "base_name",
    "join_path",
    # run_log
    "RunLog",
    # staleness
    "needs_copy",
    # types
    "EntryKind",
    "FileMetadata",
    "MetadataRead",
    "MirrorStats",
    "PendingDirectory",
    "RunLogSink",
    # walker
    "create_directory",
    "mirror_tree",
]

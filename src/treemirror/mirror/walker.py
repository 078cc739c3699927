"""Walk a source tree and mirror it into a destination tree."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from treemirror.infrastructure.config import DIRECTORY_MODE
from treemirror.infrastructure.logger import logger

from .copier import copy_file
from .errors import os_error_reason
from .metadata import entry_kind, path_exists
from .paths import join_path
from .staleness import needs_copy
from .types import MirrorStats, PendingDirectory

if TYPE_CHECKING:
    from .types import RunLogSink


def create_directory(path: str, log: RunLogSink) -> bool:
    """Make sure ``path`` exists, creating it if needed. Missing parents are not created."""
    if path_exists(path):
        return True

    try:
        os.mkdir(path, DIRECTORY_MODE)
    except OSError as err:
        log.append(f"FAILED to create '{path}' - {os_error_reason(err)}")
        return False
    return True


def _mirror_file(source_path: str, dest_path: str, log: RunLogSink, stats: MirrorStats) -> None:
    if not needs_copy(source_path, dest_path, log):
        stats.files_up_to_date += 1
        logger.debug("Up to date", source=source_path, destination=dest_path)
        return

    if copy_file(source_path, dest_path, log):
        stats.files_copied += 1
        log.append(f"'{source_path}' -> '{dest_path}'")
    else:
        stats.files_failed += 1
        log.append(f"FAILED to copy '{source_path}' to '{dest_path}'")


def _mirror_directory(pending: PendingDirectory, log: RunLogSink, stats: MirrorStats) -> list[PendingDirectory]:
    """Process one directory listing. Returns the subdirectories still to visit."""
    try:
        names = os.listdir(pending.source)
    except OSError as err:
        stats.errors += 1
        log.append(f"The source directory '{pending.source}' NOT found")
        logger.debug("Cannot list source directory", path=pending.source, error=os_error_reason(err))
        return []

    stats.directories_visited += 1
    dest_missing = not path_exists(pending.destination)
    subdirectories: list[PendingDirectory] = []

    for name in names:
        if name in (".", ".."):
            continue

        source_path = join_path(pending.source, name)
        dest_path = join_path(pending.destination, name)

        if not create_directory(pending.destination, log):
            # Abandon the rest of this listing; other pending directories still run.
            stats.errors += 1
            break
        if dest_missing:
            stats.directories_created += 1
            dest_missing = False

        if not path_exists(source_path, follow_symlinks=False):
            continue

        kind = entry_kind(source_path, log)
        if kind == "directory":
            subdirectories.append(PendingDirectory(source_path, dest_path))
        elif kind == "file":
            _mirror_file(source_path, dest_path, log, stats)
        else:
            stats.entries_ignored += 1

    return subdirectories


def mirror_tree(source_dir: str, dest_dir: str, log: RunLogSink) -> MirrorStats:
    """Copy every new or updated regular file from ``source_dir`` into ``dest_dir``.

    Traversal uses an explicit work list, so tree depth is not limited by the
    interpreter's recursion limit. Failures are written to ``log`` and the walk
    carries on; nothing is raised for per-entry errors.
    """
    stats = MirrorStats()
    work: list[PendingDirectory] = [PendingDirectory(source_dir, dest_dir)]

    while work:
        pending = work.pop()
        # Reversed so subdirectories are popped in listing order.
        work.extend(reversed(_mirror_directory(pending, log, stats)))

    return stats

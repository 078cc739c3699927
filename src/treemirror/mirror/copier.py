"""Byte-for-byte file copy with timestamp repair."""

from __future__ import annotations

import os
import shutil
from typing import TYPE_CHECKING

from treemirror.infrastructure.config import COPY_BUFFER_SIZE
from treemirror.infrastructure.logger import logger

from .errors import os_error_reason
from .metadata import path_exists, read_metadata

if TYPE_CHECKING:
    from .types import RunLogSink


def set_original_times(source_path: str, dest_path: str, log: RunLogSink) -> bool:
    """Give ``dest_path`` the access and modification times of ``source_path``.

    Best effort: returns False on failure but never raises.
    """
    source = read_metadata(source_path, log)
    if source.metadata is None:
        logger.debug("Could not read source timestamps", path=source.path, error=source.error)
        return False

    try:
        os.utime(dest_path, ns=(source.metadata.atime_ns, source.metadata.mtime_ns))
    except OSError as err:
        logger.debug("Could not set timestamps", path=dest_path, error=os_error_reason(err))
        return False
    return True


def copy_file(source_path: str, dest_path: str, log: RunLogSink) -> bool:
    """Copy ``source_path`` over ``dest_path`` and carry the timestamps across.

    Returns True on success. Every failure is written to ``log``; permissions,
    ownership and extended attributes are left alone.
    """
    try:
        src = open(source_path, "rb")
    except OSError as err:
        log.append(f"FAILED to open the file '{source_path}' for reading - {os_error_reason(err)}")
        return False

    with src:
        try:
            dst = open(dest_path, "wb")
        except OSError as err:
            log.append(f"FAILED to open the file '{dest_path}' for writing - {os_error_reason(err)}")
            return False

        try:
            with dst:
                shutil.copyfileobj(src, dst, COPY_BUFFER_SIZE)
        except OSError as err:
            log.append(f"FAILED to copy the contents of '{source_path}' to '{dest_path}' - {os_error_reason(err)}")
            return False

    if not path_exists(dest_path):
        log.append(f"FAILED to create the file '{dest_path}'")
        return False

    set_original_times(source_path, dest_path, log)
    return True

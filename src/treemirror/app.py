"""Run a backup: open the run log, mirror the tree, report the outcome."""

from __future__ import annotations

import os
import sys

from treemirror.infrastructure.config import LOG_FILE_NAME
from treemirror.infrastructure.logger import logger
from treemirror.mirror.errors import os_error_reason
from treemirror.mirror.run_log import RunLog
from treemirror.mirror.walker import mirror_tree


def run_backup(
    source_root: str | os.PathLike[str],
    dest_root: str | os.PathLike[str],
    log_path: str | os.PathLike[str] = LOG_FILE_NAME,
) -> int:
    """Mirror ``source_root`` into ``dest_root``. Returns the process exit code.

    Only a run log that cannot be created is fatal; everything else ends up in
    the log and the exit code stays 0.
    """
    try:
        run_log = RunLog.open(log_path)
    except OSError as err:
        print(f"Could not create the {os.fspath(log_path)} file - {os_error_reason(err)}", file=sys.stderr)
        return err.errno or 1

    source, destination = os.fspath(source_root), os.fspath(dest_root)
    logger.info("Backup started", source=source, destination=destination, log=run_log.path)

    with run_log:
        stats = mirror_tree(source, destination, run_log)

    logger.info("Backup finished", **stats.model_dump())
    return 0

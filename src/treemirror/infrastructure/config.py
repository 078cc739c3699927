"""Configuration constants for a mirroring run."""

from __future__ import annotations

import os

# Run log, created in the current working directory and truncated on every run.
LOG_FILE_NAME: str = "last.log"

COPY_BUFFER_SIZE: int = 64 * 1024  # 64KiB
DIRECTORY_MODE: int = 0o755

# Fallback modification time when a metadata read fails.
EPOCH: int = 0

# Diagnostic logger only; never changes what gets copied.
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

"""Path construction helpers.

Paths are plain strings joined with the platform separator. Nothing is
normalized, so whatever the caller passes in shows up verbatim in the run log.
"""

from __future__ import annotations

import os


def join_path(parent: str, child: str) -> str:
    return parent + os.sep + child


def base_name(path: str) -> str:
    """Return the part of ``path`` after the last separator (all of it if none)."""
    return path.rpartition(os.sep)[2]

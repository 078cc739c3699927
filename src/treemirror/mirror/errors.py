"""Helpers for turning OS errors into run-log text."""

from __future__ import annotations


def os_error_reason(err: OSError) -> str:
    """The human-readable reason of an OSError (``strerror`` when the OS gave one)."""
    return err.strerror or str(err)

"""Shared fixtures for mirroring tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


class MemoryLog:
    """In-memory stand-in for the run log."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def append(self, line: str) -> None:
        self.lines.append(line)

    def matching(self, fragment: str) -> list[str]:
        return [line for line in self.lines if fragment in line]


@pytest.fixture()
def memory_log() -> MemoryLog:
    return MemoryLog()


@pytest.fixture()
def mirror_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp directory and chdir into it, so last.log lands there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_file(path: Path, content: str | bytes, *, mtime: int | None = None) -> Path:
    """Write ``content`` to ``path`` (creating parents), optionally pinning its mtime in seconds."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path

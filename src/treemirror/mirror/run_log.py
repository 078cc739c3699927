"""The per-run log file (``last.log``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from treemirror.infrastructure.logger import logger

if TYPE_CHECKING:
    import os


class RunLog:
    """Append-only, line-buffered log of every copy decision in one run.

    Opened once before the walk and closed once after it. Each appended line is
    flushed immediately, so a concurrent reader sees it right away.
    """

    def __init__(self, stream: TextIO, path: str) -> None:
        self._stream = stream
        self.path = path

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> RunLog:
        """Create (or truncate) the log file. Raises OSError if that fails."""
        stream = open(path, "w", buffering=1, encoding="utf-8", errors="backslashreplace")
        return cls(stream, str(path))

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def append(self, line: str) -> None:
        self._stream.write(line + "\n")
        logger.debug("Run log", line=line)

    def close(self) -> None:
        if not self.closed:
            self._stream.close()

    def __enter__(self) -> RunLog:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

"""Tests for the copy engine."""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

import pytest

from treemirror.infrastructure.config import COPY_BUFFER_SIZE
from treemirror.mirror import copier
from treemirror.mirror.copier import copy_file, set_original_times

from ..conftest import write_file

if TYPE_CHECKING:
    from pathlib import Path

    from ..conftest import MemoryLog


class TestCopyFile:
    @pytest.fixture(autouse=True)
    def _setup(self, tmp_path: Path, memory_log: MemoryLog) -> None:
        self.tmp_dir = tmp_path
        self.log = memory_log

    def _copy(self, content: bytes) -> Path:
        src = write_file(self.tmp_dir / "src.bin", content, mtime=1_500_000_000)
        dst = self.tmp_dir / "dst.bin"
        assert copy_file(str(src), str(dst), self.log) is True
        return dst

    def test_copies_bytes(self) -> None:
        dst = self._copy(b"hello")
        assert dst.read_bytes() == b"hello"
        assert self.log.lines == []

    def test_zero_byte_file(self) -> None:
        dst = self._copy(b"")
        assert dst.exists()
        assert dst.stat().st_size == 0

    @pytest.mark.parametrize("size", [COPY_BUFFER_SIZE, 2 * COPY_BUFFER_SIZE + 17])
    def test_preserves_length_across_chunks(self, size: int) -> None:
        content = bytes(i % 251 for i in range(size))
        dst = self._copy(content)
        assert dst.read_bytes() == content

    def test_copies_timestamps(self) -> None:
        dst = self._copy(b"timed")
        src_stat = (self.tmp_dir / "src.bin").stat()
        dst_stat = dst.stat()
        assert dst_stat.st_mtime_ns == src_stat.st_mtime_ns == 1_500_000_000 * 1_000_000_000
        assert dst_stat.st_atime_ns == src_stat.st_atime_ns

    def test_overwrites_existing_destination(self) -> None:
        write_file(self.tmp_dir / "dst.bin", b"a much longer previous content")
        dst = self._copy(b"short")
        assert dst.read_bytes() == b"short"

    def test_missing_source(self) -> None:
        src = str(self.tmp_dir / "missing.bin")
        dst = self.tmp_dir / "dst.bin"

        assert copy_file(src, str(dst), self.log) is False
        assert not dst.exists()
        assert len(self.log.lines) == 1
        assert self.log.lines[0].startswith(f"FAILED to open the file '{src}' for reading")

    def test_unwritable_destination(self) -> None:
        src = write_file(self.tmp_dir / "src.bin", b"data")
        dst = str(self.tmp_dir / "no-such-dir" / "dst.bin")

        assert copy_file(str(src), dst, self.log) is False
        assert len(self.log.lines) == 1
        assert self.log.lines[0].startswith(f"FAILED to open the file '{dst}' for writing")

    def test_stream_error_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def failing_copy(src: object, dst: object, length: int = 0) -> None:
            raise OSError(errno.ENOSPC, os.strerror(errno.ENOSPC))

        monkeypatch.setattr(copier.shutil, "copyfileobj", failing_copy)
        src = write_file(self.tmp_dir / "src.bin", b"data")
        dst = str(self.tmp_dir / "dst.bin")

        assert copy_file(str(src), dst, self.log) is False
        assert len(self.log.matching("FAILED to copy the contents of")) == 1

    def test_does_not_copy_permission_bits(self) -> None:
        src = write_file(self.tmp_dir / "src.bin", b"data")
        src.chmod(0o600)
        dst = self.tmp_dir / "dst.bin"
        write_file(dst, b"old")
        dst.chmod(0o644)

        assert copy_file(str(src), str(dst), self.log) is True
        assert dst.stat().st_mode & 0o777 == 0o644

    def test_missing_destination_after_close(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(copier, "path_exists", lambda *args, **kwargs: False)
        src = write_file(self.tmp_dir / "src.bin", b"data")
        dst = str(self.tmp_dir / "dst.bin")

        assert copy_file(str(src), dst, self.log) is False
        assert self.log.lines == [f"FAILED to create the file '{dst}'"]


class TestSetOriginalTimes:
    def test_unreadable_source_is_not_fatal(self, tmp_path: Path, memory_log: MemoryLog) -> None:
        dst = write_file(tmp_path / "dst.bin", b"data", mtime=1_000)

        assert set_original_times(str(tmp_path / "missing"), str(dst), memory_log) is False
        assert dst.stat().st_mtime == 1_000

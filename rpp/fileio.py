"""Whole-file reading and writing, and file modification times."""

from __future__ import annotations

import os
from pathlib import Path

# 100-nanosecond intervals between 1601-01-01 and the Unix epoch.
_EPOCH_OFFSET = 116444736000000000

PathLike = str | os.PathLike


def _check_path(path: PathLike) -> Path:
    text = os.fspath(path)
    if not text:
        raise ValueError("empty file path")
    return Path(text)


def last_write_time(path: PathLike) -> int:
    """Last modification time as 100-nanosecond ticks since 1601-01-01 UTC.

    Raises OSError when the file's attributes cannot be read.
    """
    stat = _check_path(path).stat()
    return stat.st_mtime_ns // 100 + _EPOCH_OFFSET


def before(first: int, second: int) -> bool:
    """True when file time ``first`` is strictly earlier than ``second``."""
    return first < second


def read(path: PathLike) -> bytes:
    """Entire contents of a file; raises OSError when it cannot be read."""
    with _check_path(path).open("rb") as handle:
        return handle.read()


def write(path: PathLike, data: bytes | bytearray | memoryview) -> None:
    """Create or truncate a file and write ``data`` to it; raises OSError on failure."""
    with _check_path(path).open("wb") as handle:
        handle.write(bytes(data))
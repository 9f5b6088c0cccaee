"""Reading a file descriptor one line at a time.

Lines are returned as ``bytes`` and keep their trailing newline; the last
line of the input may lack one. ``None`` marks the end of the input.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

__all__ = ["LineReader", "get_next_line", "BUFFER_SIZE"]

BUFFER_SIZE = 1024
_NEWLINE = b"\n"


def _check_size(buffer_size: int) -> None:
    if buffer_size < 0:
        raise ValueError("buffer_size must not be negative")


def _take_line(fd: int, pending: bytes, buffer_size: int) -> tuple[Optional[bytes], bytes]:
    """Read from ``fd`` until ``pending`` holds a line; return it and the remainder."""
    parts = [pending]
    found = _NEWLINE in pending
    while not found and buffer_size > 0:
        chunk = os.read(fd, buffer_size)
        if not chunk:
            break
        parts.append(chunk)
        found = _NEWLINE in chunk
    data = b"".join(parts)
    end = data.find(_NEWLINE)
    if end < 0:
        return (data or None), b""
    return data[:end + 1], data[end + 1:]


class LineReader:
    """Reads lines from one file descriptor, ``buffer_size`` bytes at a time."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        _check_size(buffer_size)
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None at end of input.

        A read error discards any buffered data and propagates as ``OSError``.
        """
        try:
            line, self._pending = _take_line(self.fd, self._pending, self.buffer_size)
        except OSError:
            self._pending = b""
            raise
        return line

    def __iter__(self) -> LineReader:
        return self

    def __next__(self) -> bytes:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line


@dataclass
class _SharedBuffer:
    pending: bytes = b""


_shared = _SharedBuffer()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line read from ``fd``, or None at end of input.

    A single buffer is shared by all calls, whatever the descriptor, so
    data left over from one descriptor is returned before another is read.
    A negative descriptor gives None. A read error discards the buffer and
    propagates as ``OSError``.
    """
    if fd < 0:
        return None
    try:
        line, _shared.pending = _take_line(fd, _shared.pending, BUFFER_SIZE)
    except OSError:
        _shared.pending = b""
        raise
    return line
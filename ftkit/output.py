"""Writing characters, strings and numbers to text streams and file descriptors.

The stream functions write to a text stream, standard output by default,
and return the number of characters written. The ``*_fd`` functions write
encoded bytes straight to an operating-system file descriptor. Write
failures surface as the ``OSError`` the stream or descriptor raises.
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO, Union

from ftkit.numbers import itoa

__all__ = [
    "putchar",
    "putstr",
    "putnbr",
    "puthex",
    "putunsignbr",
    "putchar_fd",
    "putstr_fd",
    "putendl_fd",
    "putnbr_fd",
]

CharLike = Union[int, str]

_NUL = "\0"
_NULL_TEXT = "(null)"
_UINT_MAX = 2**32 - 1
_ULONG_MAX = 2**64 - 1


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _int(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} needs an int, got {type(value).__name__}")
    return value


def _char(c: CharLike) -> str:
    """A single character; integer codes are reduced to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_int(c, "a character") & 0xFF)


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        return _char(c).encode("utf-8")
    return bytes([_int(c, "a character") & 0xFF])


def _terminated(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s.split(_NUL, 1)[0]


def _unsigned(n: int, limit: int, what: str) -> int:
    n = _int(n, what)
    if n < 0:
        raise ValueError(f"{what} needs a non-negative value, got {n}")
    if n > limit:
        raise OverflowError(f"{n} is too large for {what}")
    return n


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar(c: CharLike, stream: Optional[TextIO] = None) -> int:
    """Write one character and return 1."""
    _stream(stream).write(_char(c))
    return 1


def putstr(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s`` up to its terminator, or "(null)" for None; return its length."""
    text = _NULL_TEXT if s is None else _terminated(s)
    _stream(stream).write(text)
    return len(text)


def putnbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write a 32-bit signed integer in decimal; return the characters written."""
    return putstr(itoa(_int(n, "putnbr")), stream)


def puthex(n: int, upper: bool = False, stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 64-bit value in hexadecimal without prefix or padding.

    Letters are upper case when ``upper`` is true. Returns the digit count.
    """
    value = _unsigned(n, _ULONG_MAX, "puthex")
    return putstr(format(value, "X" if upper else "x"), stream)


def putunsignbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 32-bit value in decimal; return the digit count."""
    value = _unsigned(n, _UINT_MAX, "putunsignbr")
    return putstr(str(value), stream)


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to file descriptor ``fd``.

    An integer is written as a single byte; a character is UTF-8 encoded.
    """
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` up to its terminator to ``fd``; None writes nothing."""
    if s is not None:
        _write_all(fd, _terminated(s).encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` and a newline to ``fd``; None writes nothing."""
    if s is not None:
        _write_all(fd, (_terminated(s) + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to ``fd``."""
    _write_all(fd, itoa(_int(n, "putnbr_fd")).encode("ascii"))
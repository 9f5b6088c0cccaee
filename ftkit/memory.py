"""Byte-buffer operations: filling, searching, comparing and copying.

Buffers are ``bytes``-like objects; the functions that write need a mutable
``bytearray``. Byte values given as integers are reduced to a single byte,
so ``0x141`` stores ``0x41``. Requests that reach past the end of a buffer
raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = [
    "bzero",
    "calloc",
    "memset",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
]

ReadableBuffer = Union[bytes, bytearray, memoryview]


def _byte(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int byte value, got {type(c).__name__}")
    return c & 0xFF


def _check_span(buf: ReadableBuffer, start: int, n: int, what: str) -> None:
    if n < 0 or start < 0:
        raise ValueError(f"negative size or offset for {what}")
    if start + n > len(buf):
        raise ValueError(
            f"{what}: {n} bytes at offset {start} exceed buffer of {len(buf)} bytes"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_span(buf, 0, n, "bzero")
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` objects of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Write ``length`` copies of byte ``c`` at the start of ``buf`` and return it."""
    value = _byte(c)
    _check_span(buf, 0, length, "memset")
    buf[:length] = bytes([value]) * length
    return buf


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte ``c`` among the first ``n`` bytes, or None."""
    value = _byte(c)
    _check_span(buf, 0, n, "memchr")
    index = bytes(buf[:n]).find(value)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_span(a, 0, n, "memcmp")
    _check_span(b, 0, n, "memcmp")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: ReadableBuffer, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check_span(src, 0, n, "memcpy source")
    _check_span(dst, 0, n, "memcpy destination")
    if dst is not src:
        dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the copy behaves as if made through a
    temporary buffer. Returns ``buf``.
    """
    _check_span(buf, src_offset, n, "memmove source")
    _check_span(buf, dst_offset, n, "memmove destination")
    if dst_offset != src_offset:
        buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf
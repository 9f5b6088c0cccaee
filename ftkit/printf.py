"""A small formatted-output routine with the conversions %c %s %d %i %u %x %X %p %%.

No flags, widths or precisions are understood. ``%u``, ``%x`` and ``%X``
take their argument as a 32-bit unsigned value, so negative numbers wrap;
``%p`` prints a 64-bit address in hexadecimal after "0x". A lone '%' at
the end of the format produces nothing.
"""

from __future__ import annotations

import io
import sys
from typing import Any, Callable, Iterator, TextIO

from ftkit.output import putchar, puthex, putnbr, putstr, putunsignbr

__all__ = ["FormatError", "format_string", "printf"]

_UINT_MASK = 2**32 - 1
_ULONG_MASK = 2**64 - 1


class FormatError(ValueError):
    """A format string that cannot be rendered with the given arguments."""


def _int_arg(value: Any, conv: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conv} needs an int, got {type(value).__name__}")
    return value


def _char(value: Any, out: TextIO) -> int:
    return putchar(value, out)


def _string(value: Any, out: TextIO) -> int:
    return putstr(value, out)


def _signed(value: Any, out: TextIO) -> int:
    return putnbr(_int_arg(value, "d"), out)


def _unsigned(value: Any, out: TextIO) -> int:
    return putunsignbr(_int_arg(value, "u") & _UINT_MASK, out)


def _hex_lower(value: Any, out: TextIO) -> int:
    return puthex(_int_arg(value, "x") & _UINT_MASK, False, out)


def _hex_upper(value: Any, out: TextIO) -> int:
    return puthex(_int_arg(value, "X") & _UINT_MASK, True, out)


def _pointer(value: Any, out: TextIO) -> int:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & _ULONG_MASK
    else:
        address = id(value) & _ULONG_MASK
    return putstr("0x", out) + puthex(address, False, out)


_CONVERSIONS: dict[str, Callable[[Any, TextIO], int]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _convert(conv: str, values: Iterator[Any], out: TextIO) -> None:
    if conv == "%":
        putchar("%", out)
        return
    handler = _CONVERSIONS.get(conv)
    if handler is None:
        raise FormatError(f"unknown conversion %{conv}")
    try:
        value = next(values)
    except StopIteration:
        raise FormatError(f"missing argument for %{conv}") from None
    handler(value, out)


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the text.

    Raises ``FormatError`` for an unknown conversion or a missing argument.
    Surplus arguments are ignored.
    """
    out = io.StringIO()
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    for ch in chars:
        if ch != "%":
            out.write(ch)
            continue
        conv = next(chars, None)
        if conv is None:
            break
        _convert(conv, values, out)
    return out.getvalue()


def printf(fmt: str, *args: Any) -> int:
    """Render ``fmt`` with ``args`` to standard output; return the characters written.

    Nothing is written when the format cannot be rendered.
    """
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)
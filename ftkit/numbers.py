"""Conversions between numbers and their decimal text form."""

from __future__ import annotations

import math
from itertools import takewhile

__all__ = ["atoi", "itoa", "strtod"]

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _sign_and_rest(text: str) -> tuple[int, str]:
    """Skip leading white space and one optional sign."""
    rest = text.lstrip(_SPACE)
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    return sign, rest


def _leading_digits(text: str) -> str:
    return "".join(takewhile(lambda ch: ch in _DIGITS, text))


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading white space is skipped and one sign is honoured; parsing stops
    at the first non-digit. Text without digits gives 0. The result is a
    32-bit signed integer, wrapping on overflow.
    """
    sign, rest = _sign_and_rest(text)
    digits = _leading_digits(rest)
    if not digits:
        return 0
    return _wrap_int32(sign * int(digits))


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return ("-" if n < 0 else "") + str(abs(n))


def strtod(text: str) -> float:
    """Parse a leading decimal number with an optional fraction from ``text``.

    Leading white space is skipped and one sign is honoured. The integer
    digits, an optional '.', and the fraction digits are read; anything
    after them is ignored. No exponent form is recognised and no range
    checks are made.
    """
    sign, rest = _sign_and_rest(text)
    whole_digits = _leading_digits(rest)
    rest = rest[len(whole_digits):]
    if rest.startswith("."):
        rest = rest[1:]
    fraction_digits = _leading_digits(rest)

    whole = 0.0
    for ch in whole_digits:
        whole = whole * 10.0 + (ord(ch) - ord("0"))
    fraction = 0.0
    for ch in fraction_digits:
        fraction = fraction * 10.0 + (ord(ch) - ord("0"))
    fraction /= math.prod([10.0] * len(fraction_digits))
    return float(sign) * (whole + fraction)
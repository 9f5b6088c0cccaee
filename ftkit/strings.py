"""Searching, comparing and size-bounded copying of text.

Text is treated as a terminated string: it ends at the first NUL
character, if it holds one, and ``None`` is read as the empty string
where the original routines accept a null pointer. Positions are
returned as indices, with ``None`` meaning "not found".
"""

from __future__ import annotations

from itertools import islice
from typing import Optional, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
]

_NUL = "\0"


def _text(s: Optional[str]) -> str:
    if s is None:
        return ""
    return s.split(_NUL, 1)[0]


def _char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(dstsize: int) -> None:
    if dstsize < 0:
        raise ValueError("dstsize must not be negative")


def strlen(s: Optional[str]) -> int:
    """Number of characters before the terminator; 0 for None."""
    return len(_text(s))


def strchr(s: Optional[str], c: Union[int, str]) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator, at ``strlen(s)``.
    """
    if s is None:
        return None
    text = _text(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator, at ``strlen(s)``.
    """
    text = _text(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when they agree.
    """
    a = _text(s1) + _NUL
    b = _text(s2) + _NUL
    for x, y in islice(zip(a, b), max(n, 0)):
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly in the first ``length`` characters.

    An empty needle is found at 0.
    """
    target = _text(needle)
    if not target:
        return 0
    index = _text(haystack)[:max(length, 0)].find(target)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters holding ``dst``.

    At most ``dstsize - 1`` characters are copied, leaving room for the
    terminator; with a size of 0 the buffer is untouched. Returns the new
    buffer contents and the length of ``src``; a length not below
    ``dstsize`` means the copy was truncated.
    """
    _check_size(dstsize)
    source = _text(src)
    text = source[:dstsize - 1] if dstsize > 0 else _text(dst)
    return text, len(source)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``dstsize`` characters.

    At most ``dstsize - 1 - strlen(dst)`` characters are appended. Nothing
    is appended when ``dstsize`` is 0 or ``dst`` already fills the buffer.
    Returns the new contents and the length the full result would have had:
    the length of ``dst`` (or ``dstsize``, if smaller) plus that of ``src``.
    """
    _check_size(dstsize)
    original = _text(dst)
    source = _text(src)
    if dstsize > 0 and dstsize - 1 >= len(original):
        text = original + source[:dstsize - 1 - len(original)]
    else:
        text = original
    total = min(dstsize, len(original)) + len(source)
    return text, total
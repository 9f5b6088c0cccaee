"""Building new strings: copies, slices, joins, trims, splits and maps.

Text is read as a terminated string: it ends at the first NUL character,
if it holds one. Where the original routines accept a null pointer,
``None`` is accepted here with the same meaning.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Callable, Optional, Union

__all__ = [
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
]

_NUL = "\0"


def _terminated(s: Optional[str]) -> str:
    if s is None:
        return ""
    return s.split(_NUL, 1)[0]


def _separator(sep: Union[int, str]) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    if isinstance(sep, bool) or not isinstance(sep, int):
        raise TypeError(f"expected an int or a one-character str, got {type(sep).__name__}")
    return chr(sep & 0xFF)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    if s is None:
        raise TypeError("strdup needs a string, not None")
    return _terminated(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start beyond the end of ``s`` gives the empty string; ``None`` gives
    ``None``.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    text = _terminated(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate ``s1`` and ``s2``; ``None`` counts as the empty string."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: Optional[str], charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``.

    Without a charset ``s`` is copied unchanged; ``None`` for ``s`` gives
    the empty string.
    """
    if s is None:
        return ""
    text = _terminated(s)
    if charset is None:
        return text
    chars = _terminated(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: Optional[str], sep: Union[int, str]) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces.

    Runs of separators count as one, and leading or trailing separators
    produce nothing. ``None`` gives an empty list.
    """
    separator = _separator(sep)
    text = _terminated(s)
    return [piece for piece in text.split(separator) if piece]


def strmapi(
    s: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``f(index, char)`` applied to each character of ``s``.

    Returns ``None`` when ``s`` or ``f`` is ``None``. Each call of ``f`` must
    give exactly one character; a NUL from ``f`` ends the result there.
    """
    if s is None or f is None:
        return None
    mapped = []
    for index, ch in enumerate(_terminated(s)):
        result = f(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping function must return one character, got {result!r}")
        mapped.append(result)
    return _terminated("".join(mapped))


def striteri(
    s: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Apply ``f(index, char)`` to each character of a mutable sequence in place.

    Where ``f`` returns a character it replaces the one at that index; a
    return of ``None`` leaves it alone. Iteration stops at a NUL element.
    Nothing happens when ``s`` or ``f`` is ``None``.
    """
    if s is None or f is None:
        return
    if isinstance(s, str):
        raise TypeError("striteri modifies its argument; pass a list of characters")
    for index, ch in enumerate(s):
        if ch == _NUL:
            break
        result = f(index, ch)
        if result is None:
            continue
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"iteration function must return one character, got {result!r}")
        s[index] = result
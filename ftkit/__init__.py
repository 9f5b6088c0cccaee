"""Helpers for characters, numbers, buffers, strings, output, lists and line reading."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "memory",
    "strings",
    "textops",
    "output",
    "printf",
    "linkedlist",
    "nextline",
]
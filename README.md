# ftkit

ftkit is a small library of helpers that behave like classic C library
routines, written with Python types: strings, `bytes`/`bytearray`, lists,
iterators and exceptions.

## Modules

- `ftkit.chars`: ASCII character tests and case mapping: `isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`. Each takes
  an integer code or a one-character string; `toupper` and `tolower` return
  the same type they were given.
- `ftkit.numbers`: `atoi` (leading integer, wrapping to 32 bits), `itoa`
  (raises `OverflowError` outside the 32-bit signed range) and `strtod` (a
  decimal number with an optional fraction, no exponent).
- `ftkit.memory`: byte-buffer operations `bzero`, `calloc`, `memset`,
  `memchr`, `memcmp`, `memcpy` and `memmove(buf, dst_offset, src_offset, n)`.
  Writing functions need a `bytearray`; spans past the end of a buffer raise
  `ValueError`. `memchr` returns an index or `None`.
- `ftkit.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy` and `strlcat`. Text ends at its first NUL character. Searches
  return an index or `None`; `strlcpy` and `strlcat` return a tuple of the new
  buffer contents and the length the full result would have had.
- `ftkit.textops`: `strdup`, `substr`, `strjoin`, `strtrim`, `split` (drops
  empty pieces), `strmapi` and `striteri` (modifies a list of characters in
  place).
- `ftkit.output`: writers to a text stream, standard output by default,
  returning the number of characters written (`putchar`, `putstr`, `putnbr`,
  `puthex`, `putunsignbr`), and writers to a file descriptor (`putchar_fd`,
  `putstr_fd`, `putendl_fd`, `putnbr_fd`). `putstr(None)` writes `(null)`.
- `ftkit.printf`: `format_string(fmt, *args)` returns the rendered text and
  `printf(fmt, *args)` writes it to standard output and returns its length.
  Conversions are `%c %s %d %i %u %x %X %p %%`, with no flags or widths. An
  unknown conversion or a missing argument raises `FormatError`.
- `ftkit.linkedlist`: `Node` (with `content`, `next` and `delete`) and a
  singly linked `LinkedList` with `head`, `nodes()`, `add_front`, `add_back`,
  `last`, `clear`, `for_each`, `map`, `len()` and iteration over the contents.
- `ftkit.nextline`: `LineReader(fd, buffer_size=BUFFER_SIZE)` reads lines as
  `bytes`, keeping the newline, through `read_line()` or iteration; the
  `get_next_line(fd)` function does the same with one buffer shared by all
  calls. `None` marks the end of input.

ftkit is a library only; it installs no command-line program.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.textops import split, strtrim
from ftkit.printf import format_string

atoi("   -42abc")          # -42
itoa(-2147483648)          # "-2147483648"
split("  a  b c ", " ")    # ["a", "b", "c"]
strtrim("xxhixx", "x")     # "hi"
format_string("%d is %x in hex", 255, 255)   # "255 is ff in hex"
```

```python
from ftkit.linkedlist import LinkedList, Node

items = LinkedList()
items.add_back(Node(1))
items.add_back(Node(2))
items.add_front(Node(0))
list(items)                                    # [0, 1, 2]
doubled = items.map(lambda x: x * 2, lambda x: None)
list(doubled)                                  # [0, 2, 4]
```

```python
import os
from ftkit.nextline import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line.decode(), end="")
os.close(fd)
```
import io
import os

import pytest

from ftkit.output import (
    putchar,
    putchar_fd,
    putendl_fd,
    puthex,
    putnbr,
    putnbr_fd,
    putstr,
    putstr_fd,
    putunsignbr,
)


def _collect(read_end, write_end):
    os.close(write_end)
    chunks = []
    while True:
        chunk = os.read(read_end, 4096)
        if not chunk:
            break
        chunks.append(chunk)
    os.close(read_end)
    return b"".join(chunks)


def test_putchar_string():
    buf = io.StringIO()
    assert putchar("a", stream=buf) == 1
    assert buf.getvalue() == "a"


def test_putchar_code():
    buf = io.StringIO()
    assert putchar(ord("Z"), stream=buf) == 1
    assert buf.getvalue() == "Z"


def test_putchar_code_reduced_to_byte():
    buf = io.StringIO()
    assert putchar(0x100 + ord("A"), stream=buf) == 1
    assert buf.getvalue() == "A"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar("ab", io.StringIO())


def test_putchar_defaults_to_stdout(capsys):
    assert putchar("q") == 1
    assert capsys.readouterr().out == "q"


def test_putstr_writes_text():
    buf = io.StringIO()
    assert putstr("hello", stream=buf) == 5
    assert buf.getvalue() == "hello"


def test_putstr_stops_at_nul():
    buf = io.StringIO()
    assert putstr("abc\0def", stream=buf) == 3
    assert buf.getvalue() == "abc"


def test_putstr_none_writes_null_marker():
    buf = io.StringIO()
    assert putstr(None, stream=buf) == 6
    assert buf.getvalue() == "(null)"


def test_putstr_rejects_non_string():
    with pytest.raises(TypeError):
        putstr(12, io.StringIO())


@pytest.mark.parametrize("n", [0, 7, -7, 123456, 2147483647, -2147483648])
def test_putnbr_round_trip(n):
    buf = io.StringIO()
    count = putnbr(n, stream=buf)
    text = buf.getvalue()
    assert int(text) == n
    assert count == len(text)


def test_putnbr_int_min():
    buf = io.StringIO()
    assert putnbr(-2147483648, stream=buf) == 11
    assert buf.getvalue() == "-2147483648"


def test_putnbr_overflow():
    with pytest.raises(OverflowError):
        putnbr(2**31, io.StringIO())


@pytest.mark.parametrize("n", [0, 9, 10, 255, 4096, 2**64 - 1])
def test_puthex_round_trip_lower(n):
    buf = io.StringIO()
    count = puthex(n, stream=buf)
    text = buf.getvalue()
    assert int(text, 16) == n
    assert text == text.lower()
    assert text == "0" or not text.startswith("0")
    assert count == len(text)


def test_puthex_upper():
    buf = io.StringIO()
    count = puthex(0xABCDEF, upper=True, stream=buf)
    text = buf.getvalue()
    assert text == "ABCDEF"
    assert count == 6


def test_puthex_negative():
    with pytest.raises(ValueError):
        puthex(-1, False, io.StringIO())


def test_puthex_too_large():
    with pytest.raises(OverflowError):
        puthex(2**64, False, io.StringIO())


@pytest.mark.parametrize("n", [0, 5, 10, 2**32 - 1])
def test_putunsignbr_round_trip(n):
    buf = io.StringIO()
    count = putunsignbr(n, stream=buf)
    text = buf.getvalue()
    assert int(text) == n
    assert count == len(text)


def test_putunsignbr_negative():
    with pytest.raises(ValueError):
        putunsignbr(-1, io.StringIO())


def test_putunsignbr_too_large():
    with pytest.raises(OverflowError):
        putunsignbr(2**32, io.StringIO())


def test_putchar_fd_string():
    read_end, write_end = os.pipe()
    putchar_fd("x", write_end)
    assert _collect(read_end, write_end) == b"x"


def test_putchar_fd_code():
    read_end, write_end = os.pipe()
    putchar_fd(ord("A"), write_end)
    assert _collect(read_end, write_end) == b"A"


def test_putstr_fd_text():
    read_end, write_end = os.pipe()
    putstr_fd("hello", write_end)
    assert _collect(read_end, write_end) == b"hello"


def test_putstr_fd_stops_at_nul():
    read_end, write_end = os.pipe()
    putstr_fd("ab\0cd", write_end)
    assert _collect(read_end, write_end) == b"ab"


def test_putstr_fd_none_writes_nothing():
    read_end, write_end = os.pipe()
    putstr_fd(None, write_end)
    assert _collect(read_end, write_end) == b""


def test_putendl_fd_adds_newline():
    read_end, write_end = os.pipe()
    putendl_fd("line", write_end)
    assert _collect(read_end, write_end) == b"line\n"


def test_putendl_fd_none_writes_nothing():
    read_end, write_end = os.pipe()
    putendl_fd(None, write_end)
    assert _collect(read_end, write_end) == b""


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647])
def test_putnbr_fd_round_trip(n):
    read_end, write_end = os.pipe()
    putnbr_fd(n, write_end)
    assert int(_collect(read_end, write_end)) == n


def test_putnbr_fd_int_min():
    read_end, write_end = os.pipe()
    putnbr_fd(-2147483648, write_end)
    assert _collect(read_end, write_end) == b"-2147483648"


def test_putchar_fd_closed_descriptor():
    read_end, write_end = os.pipe()
    os.close(read_end)
    os.close(write_end)
    with pytest.raises(OSError):
        putchar_fd("x", write_end)
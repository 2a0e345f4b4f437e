import io
import os

import pytest

from pushswap.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _read_all(read_end):
    with os.fdopen(read_end, "rb") as reader:
        return reader.read().decode()


def test_putchar_to_stream():
    out = io.StringIO()
    assert putchar_fd("x", out) == 1
    assert out.getvalue() == "x"


def test_putchar_from_code():
    out = io.StringIO()
    putchar_fd(ord("Z"), out)
    assert out.getvalue() == "Z"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putstr_to_stream():
    out = io.StringIO()
    text = "push swap"
    assert putstr_fd(text, out) == len(text)
    assert out.getvalue() == text


def test_putendl_appends_newline():
    out = io.StringIO()
    assert putendl_fd("Error", out) == len("Error") + 1
    assert out.getvalue() == "Error\n"


@pytest.mark.parametrize("n", [0, 7, 123, 2147483647])
def test_putnbr_round_trip(n):
    out = io.StringIO()
    putnbr_fd(n, out)
    assert int(out.getvalue()) == n


def test_putnbr_int_min():
    out = io.StringIO()
    assert putnbr_fd(-2147483648, out) == len("-2147483648")
    assert out.getvalue() == "-2147483648"


def test_putnbr_negative_has_sign():
    out = io.StringIO()
    putnbr_fd(-42, out)
    assert out.getvalue().startswith("-")
    assert int(out.getvalue()) == -42


def test_write_to_file_descriptor():
    read_end, write_end = os.pipe()
    try:
        count = putendl_fd("hello", write_end)
    finally:
        os.close(write_end)
    text = _read_all(read_end)
    assert text == "hello\n"
    assert count == len(text)


def test_putnbr_to_file_descriptor():
    read_end, write_end = os.pipe()
    try:
        putnbr_fd(31, write_end)
    finally:
        os.close(write_end)
    text = _read_all(read_end)
    assert int(text) == 31


@pytest.mark.parametrize(
    "func,arg",
    [(putchar_fd, "a"), (putstr_fd, "abc"), (putendl_fd, "abc"), (putnbr_fd, 5)],
)
def test_negative_descriptor_writes_nothing(func, arg):
    assert func(arg, -1) == 0
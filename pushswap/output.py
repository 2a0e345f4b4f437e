"""Writing characters, strings and numbers to a stream or file descriptor.

A target is either a text stream or an integer file descriptor. A
negative descriptor writes nothing. Each function returns the number of
characters written.
"""

from __future__ import annotations

import os
from typing import TextIO, Union

Target = Union[TextIO, int]


def _emit(text: str, stream: Target) -> int:
    if isinstance(stream, int):
        if stream < 0:
            return 0
        data = memoryview(text.encode())
        while data:
            written = os.write(stream, data)
            data = data[written:]
        return len(text)
    stream.write(text)
    return len(text)


def putchar_fd(c: Union[str, int], stream: Target) -> int:
    """Write one character, given as a one-character string or a char code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    else:
        char = chr(int(c) & 0xFF)
    return _emit(char, stream)


def putstr_fd(text: str, stream: Target) -> int:
    """Write a string."""
    return _emit(text, stream)


def putendl_fd(text: str, stream: Target) -> int:
    """Write a string followed by a newline."""
    return _emit(f"{text}\n", stream)


def putnbr_fd(n: int, stream: Target) -> int:
    """Write an integer in decimal."""
    return _emit(str(int(n)), stream)
"""Minimal printf-style formatting with the %c %s %p %d %i %u %x %X %% conversions."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)


def _as_int32(value: int) -> int:
    """Reinterpret an integer as a 32-bit signed int."""
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value & _INT_SIGN else value


def _as_uint32(value: int) -> int:
    """Reinterpret an integer as a 32-bit unsigned int."""
    return value & _UINT_MASK


def format_signed(value: int) -> str:
    """Render a signed integer in decimal."""
    return str(int(value))


def format_unsigned(value: int) -> str:
    """Render an integer as a 32-bit unsigned decimal."""
    return str(_as_uint32(int(value)))


def format_hex(value: int, upper: bool = False) -> str:
    """Render an integer in hexadecimal, with a leading '-' when negative."""
    value = int(value)
    digits = format(abs(value), "X" if upper else "x")
    return f"-{digits}" if value < 0 else digits


def format_pointer(address: int | None) -> str:
    """Render an address as 0x-prefixed lowercase hex, or '(nil)' for a null one."""
    if not address:
        return "(nil)"
    return "0x" + format(int(address), "x")


def format_string(value: str | None) -> str:
    """Render a string argument, or '(null)' when it is missing."""
    return "(null)" if value is None else str(value)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        return value[:1]
    return chr(int(value) & 0xFF)


_CONVERSIONS = {
    "c": _format_char,
    "s": format_string,
    "p": format_pointer,
    "d": lambda v: format_signed(_as_int32(int(v))),
    "i": lambda v: format_signed(_as_int32(int(v))),
    "u": format_unsigned,
    "x": lambda v: format_hex(_as_uint32(int(v)), upper=False),
    "X": lambda v: format_hex(_as_uint32(int(v)), upper=True),
}


def render(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    An unknown conversion character is consumed and produces nothing.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        pieces.append(convert(arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered text to ``stream`` (stdout by default); return its length."""
    text = render(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)
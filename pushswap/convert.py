"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value & _INT_SIGN else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first character that is not an ASCII digit. Text without digits
    gives 0, and the result wraps around like a 32-bit int.
    """
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    value = 0
    while index < len(text) and text[index] in _DIGITS:
        value = value * 10 + _DIGITS.index(text[index])
        index += 1
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    return str(int(n))
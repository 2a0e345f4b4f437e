"""Reading the puzzle's numbers from command-line words."""

from __future__ import annotations

from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the input numbers are malformed, out of range or repeated."""


def check_syntax(token: str) -> bool:
    """Return True when ``token`` is an optional sign followed by ASCII digits only."""
    if not token:
        return False
    body = token[1:] if token[0] in "+-" else token
    return bool(body) and all(char in _DIGITS for char in body)


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def parse_numbers(tokens: Iterable[str]) -> list[int]:
    """Convert tokens to distinct 32-bit integers, in order.

    Raises InputError on bad syntax, a value outside the int range, or a
    value that already appeared.
    """
    numbers: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if not check_syntax(token):
            raise InputError(f"invalid number: {token!r}")
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"number out of range: {token!r}")
        if value in seen:
            raise InputError(f"duplicate number: {value}")
        seen.add(value)
        numbers.append(value)
    return numbers
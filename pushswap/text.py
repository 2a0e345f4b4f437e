"""String helpers: length, search, comparison, bounded copies, slicing and splitting.

Positions are returned as indexes into the string, with None where no
match exists. As with NUL-terminated strings, searching for "\\0"
finds the end of the string.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

from pushswap.parse import split_words

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for "\\0" returns the length of the string.
    """
    char = _char(c)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for "\\0" returns the length of the string.
    """
    char = _char(c)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal character codes, or 0 when
    the compared parts are equal. A string that ends early compares as if
    followed by "\\0".
    """
    _check_size("n", n)
    for index in range(n):
        left = first[index] if index < len(first) else _NUL
        right = second[index] if index < len(second) else _NUL
        if left != right or left == _NUL:
            return ord(left) - ord(right)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the length
    of ``src``, so truncation shows as a length of at least ``size``.
    """
    _check_size("size", size)
    return src[: max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had; when ``size`` does not exceed ``len(dst)`` that length is
    ``size + len(src)`` and ``dst`` is left unchanged.
    """
    _check_size("size", size)
    room = max(size - len(dst) - 1, 0)
    result = dst + src[:room]
    if size <= len(dst):
        return result, len(src) + size
    return result, len(src) + len(dst)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when there is no
    match that ends within ``length`` characters.
    """
    _check_size("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return split_words(text, _char(sep))


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each character of ``chars``, in place.

    When ``func`` returns a character it replaces the one at that index;
    returning None leaves it as it was.
    """
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
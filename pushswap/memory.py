"""Byte-buffer helpers: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(length: int, *buffers) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to ``value`` (as a byte); return buf."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total size does not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError("allocation size overflows")
    return bytearray(count * size)


def memchr(data: bytes, value: int, length: int) -> int | None:
    """Return the offset of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, data)
    offset = bytes(data[:length]).find(value & 0xFF)
    return None if offset < 0 else offset


def memcmp(first: bytes, second: bytes, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length(length, first, second)
    for left, right in zip(first[:length], second[:length]):
        if left != right:
            return left - right
    return 0


def memcpy(dst: bytearray, src: bytes, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``; return dst."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap. Returns buf.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if max(dst, src) + length > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf
import pytest

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"xyzw")
    result = memset(buf, ord("q"), 2)
    assert result is buf
    assert buf[:2] == b"qq"
    assert buf[2:] == b"zw"


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert all(byte == 0x141 & 0xFF for byte in buf)


def test_memset_rejects_overlong_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf == bytes(4) + b"ef"


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 5)
    assert len(buf) == 15
    assert not any(buf)


def test_calloc_zero_size():
    assert len(calloc(10, 0)) == 0


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_length():
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"hello", ord("z"), 5) is None


def test_memchr_truncates_value():
    data = bytes([1, 2, 0x41])
    assert memchr(data, 0x141, 3) == 2


def test_memcmp_difference_of_first_unequal_byte():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) == ord("d") - ord("c")


def test_memcmp_equal_prefix():
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(bytes([200]), bytes([1]), 1) > 0


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst == b"abc..."


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf == original[:2] + original[0:4]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    result = memmove(buf, 0, 2, 4)
    assert result is buf
    assert buf == original[2:6] + original[4:]


def test_memmove_out_of_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
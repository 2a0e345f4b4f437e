import string

import pytest

from pushswap.chars import isalnum, isalpha, isascii, isdigit, isprint, tolower, toupper

ASCII = range(128)


def test_isalpha_matches_ascii_letters():
    assert {c for c in ASCII if isalpha(c)} == {ord(ch) for ch in string.ascii_letters}


def test_isdigit_matches_ascii_digits():
    assert {c for c in ASCII if isdigit(c)} == {ord(ch) for ch in string.digits}


def test_isalnum_is_union_of_alpha_and_digit():
    for c in range(256):
        assert isalnum(c) == (isalpha(c) or isdigit(c))


def test_non_ascii_letters_are_not_alpha():
    assert not isalpha("é")
    assert not isalnum("é")
    assert not isdigit("٣")


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_matches_printable_ascii():
    for c in ASCII:
        assert isprint(c) == chr(c).isprintable()
    assert not isprint(127)
    assert not isprint(200)


def test_string_arguments_accepted():
    assert isalpha("q")
    assert isdigit("7")
    assert isprint(" ")
    assert not isprint("\t")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        toupper("")


def test_toupper_on_codes():
    for c in ASCII:
        assert toupper(c) == ord(chr(c).upper())


def test_tolower_on_codes():
    for c in ASCII:
        assert tolower(c) == ord(chr(c).lower())


def test_case_conversion_keeps_strings_as_strings():
    assert toupper("m") == "m".upper()
    assert tolower("M") == "M".lower()
    assert toupper("5") == "5"


def test_case_conversion_leaves_non_ascii_alone():
    assert toupper("é") == "é"
    assert tolower(ord("É")) == ord("É")
    assert toupper(-5) == -5


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_case_round_trip(ch):
    assert tolower(toupper(ch)) == ch.lower()
    assert toupper(tolower(ch)) == ch.upper()
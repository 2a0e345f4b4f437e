import pytest

from pushswap.parse import InputError, check_syntax, parse_numbers, split_words


@pytest.mark.parametrize("token", ["0", "42", "+7", "-13", "007"])
def test_check_syntax_accepts_numbers(token):
    assert check_syntax(token) is True


@pytest.mark.parametrize("token", ["", "+", "-", "1a", "a1", "--1", "1-", " 1", "1.5", "٣"])
def test_check_syntax_rejects_other_text(token):
    assert check_syntax(token) is False


def test_split_words_drops_empty_words():
    assert split_words("  1  2 3 ", " ") == ["1", "2", "3"]


def test_split_words_only_separators():
    assert split_words("     ", " ") == []


def test_split_words_other_separator():
    assert split_words(",4,,5", ",") == ["4", "5"]


def test_parse_numbers_keeps_order_and_signs():
    assert parse_numbers(["3", "-2", "+1", "0"]) == [3, -2, 1, 0]


def test_parse_numbers_int_limits():
    assert parse_numbers(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


@pytest.mark.parametrize("tokens", [["2147483648"], ["-2147483649"], ["99999999999999999999"]])
def test_parse_numbers_out_of_range(tokens):
    with pytest.raises(InputError):
        parse_numbers(tokens)


def test_parse_numbers_duplicate():
    with pytest.raises(InputError):
        parse_numbers(["1", "2", "1"])


def test_parse_numbers_duplicate_with_sign_spelling():
    with pytest.raises(InputError):
        parse_numbers(["5", "+5"])


def test_parse_numbers_bad_syntax():
    with pytest.raises(InputError):
        parse_numbers(["1", "two"])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_numbers([""])
import string

import pytest

from cbasics.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)
    assert is_alpha(ord(c)) == (c in string.ascii_letters)


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_digit_matches_ascii_digits(c):
    assert is_digit(c) == (c in string.digits)


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_alnum_is_alpha_or_digit(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("ß") is False
    assert is_digit("٣") is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert is_print("\n") is False


@pytest.mark.parametrize("c", ALL_ASCII)
def test_case_conversion_matches_ascii_rules(c):
    expected_upper = c.upper() if c in string.ascii_lowercase else c
    expected_lower = c.lower() if c in string.ascii_uppercase else c
    assert to_upper(c) == expected_upper
    assert to_lower(c) == expected_lower


def test_case_conversion_keeps_input_type():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper("q") == "Q"


@pytest.mark.parametrize("c", string.ascii_letters)
def test_case_round_trip(c):
    assert to_lower(to_upper(c)) == c.lower()
    assert to_upper(to_lower(c)) == c.upper()


def test_non_ascii_unchanged_by_case_conversion():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
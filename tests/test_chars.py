import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CHARS = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_alpha(ord(ch)) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))
    assert is_alnum(ch) == (ch in string.ascii_letters + string.digits)


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("ß")
    assert not is_digit("٣")


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)
    assert all(is_print(ch) for ch in string.ascii_letters + string.digits)


def test_to_upper_on_strings():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper


def test_to_lower_on_strings():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_lower(upper) == lower


def test_case_conversion_on_ints_returns_ints():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " \t\n")
def test_case_conversion_leaves_other_chars(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_leaves_non_ascii():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"
    assert to_upper(300) == 300


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)
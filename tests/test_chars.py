import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ascii_chars = st.characters(min_codepoint=0, max_codepoint=127)
int32 = st.integers(min_value=-2147483648, max_value=2147483647)


@given(ascii_chars)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)


@given(ascii_chars)
def test_is_digit_matches_ascii_digits(c):
    assert is_digit(c) == (c in string.digits)


@given(ascii_chars)
def test_is_alnum_is_alpha_or_digit(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_classification_of_plain_characters():
    assert is_alpha("a") is True
    assert is_alpha(97) is True
    assert is_digit("+") is False
    assert is_alnum(" ") is False
    assert is_print(33) is True


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@given(st.sampled_from(string.ascii_lowercase))
def test_case_round_trip(c):
    upper = to_upper(c)
    assert upper == c.upper()
    assert to_lower(upper) == c


@given(st.integers(min_value=-1000, max_value=1000))
def test_case_conversion_leaves_non_letters(code):
    if not is_alpha(code):
        assert to_upper(code) == code
        assert to_lower(code) == code


def test_case_conversion_keeps_input_kind():
    assert to_upper("g") == "G"
    assert to_upper(ord("g")) == ord("G")
    assert to_lower("A") == "a"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12345", 12345),
        ("-6789", -6789),
        ("0", 0),
        ("  42", 42),
        ("   -999", -999),
        ("abc123", 0),
        ("123abc", 123),
        ("  +789xyz", 789),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


@given(int32)
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


@given(int32)
def test_itoa_matches_builtin_str(n):
    assert itoa(n) == str(n)


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa("12")
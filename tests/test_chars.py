import string

import pytest

from unitkit.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

CODES = range(-5, 300)


def test_isalpha_matches_ascii_letters():
    found = {c for c in CODES if isalpha(c)}
    assert found == {ord(ch) for ch in string.ascii_letters}


def test_isdigit_matches_digits():
    found = {c for c in CODES if isdigit(c)}
    assert found == {ord(ch) for ch in string.digits}


def test_isalnum_is_union_of_alpha_and_digit():
    for c in CODES:
        assert isalnum(c) == (isalpha(c) or isdigit(c))


def test_isascii_range():
    found = [c for c in CODES if isascii(c)]
    assert found == list(range(128))


def test_isprint_range():
    found = {c for c in CODES if isprint(c)}
    assert found == {ord(ch) for ch in string.printable if ch not in string.whitespace or ch == " "}


def test_string_arguments_agree_with_codes():
    for ch in string.printable:
        assert isalpha(ch) == isalpha(ord(ch))
        assert isprint(ch) == isprint(ord(ch))


def test_toupper_on_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert toupper(lower) == upper
        assert toupper(ord(lower)) == ord(upper)


def test_tolower_on_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert tolower(upper) == lower
        assert tolower(ord(upper)) == ord(lower)


def test_non_letters_unchanged():
    for c in CODES:
        if not isalpha(c):
            assert toupper(c) == c
            assert tolower(c) == c


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert tolower(toupper(ch)) == ch.lower()
        assert toupper(tolower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        isdigit(None)
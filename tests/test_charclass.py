import pytest

from pushswap.charclass import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_isalpha_matches_ascii_letters(code):
    assert isalpha(code) == chr(code).isalpha()


@pytest.mark.parametrize("code", ASCII)
def test_isdigit_matches_ascii_digits(code):
    assert isdigit(code) == (chr(code) in "0123456789")


@pytest.mark.parametrize("code", ASCII)
def test_isalnum_is_union_of_alpha_and_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@pytest.mark.parametrize("code", [170, 200, 233, 1000, -1])
def test_non_ascii_codes_are_not_letters(code):
    assert isalpha(code) is False
    assert isalnum(code) is False
    assert isdigit(code) is False


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(-1) is False
    assert isascii(128) is False


@pytest.mark.parametrize("code", ASCII)
def test_isprint_matches_python(code):
    assert isprint(code) == chr(code).isprintable()


def test_isprint_rejects_outside_range():
    assert isprint(31) is False
    assert isprint(127) is False
    assert isprint(1111) is False


def test_case_mapping_of_letters():
    assert tolower(ord("P")) == ord("p")
    assert toupper(ord("b")) == ord("B")


@pytest.mark.parametrize("letter", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
def test_case_round_trip(letter):
    code = ord(letter)
    assert toupper(tolower(code)) == code
    assert tolower(code) == ord(letter.lower())


@pytest.mark.parametrize("code", [c for c in range(256) if not chr(c).isascii() or not chr(c).isalpha()])
def test_non_letters_unchanged(code):
    assert tolower(code) == code
    assert toupper(code) == code
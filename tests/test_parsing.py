import pytest

from pushswap.parsing import (
    InputError,
    atoi,
    atoi_safe,
    build_stack,
    has_duplicates,
    is_valid_number,
    parse_input,
    split_words,
    validate_input,
)
from pushswap.stack import Stack


def test_split_words_drops_empty_words():
    assert split_words("1 2  3 ", " ") == ["1", "2", "3"]


def test_split_words_only_delimiters():
    assert split_words("    ", " ") == []


def test_split_words_other_delimiter_keeps_spaces():
    assert split_words("a b,,c", ",") == ["a b", "c"]


@pytest.mark.parametrize(
    "text, expected",
    [("  -42", -42), ("+7abc", 7), ("\t\n 13", 13), ("-2147483648", -2147483648)],
)
def test_atoi_reads_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_double_sign_reads_nothing():
    assert atoi("--5") == 0


def test_atoi_wraps_like_int():
    assert atoi("2147483648") == -2147483648


def test_parse_input_no_arguments():
    assert parse_input([]) is None


def test_parse_input_single_argument_is_split():
    assert parse_input(["3 1  2"]) == ["3", "1", "2"]


def test_parse_input_many_arguments_taken_as_is():
    assert parse_input(["3", "1 2"]) == ["3", "1 2"]


@pytest.mark.parametrize("text", ["0", "-1", "+15", "2147483648", "007"])
def test_is_valid_number_accepts(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize("text", ["", "-", "+", "1a", " 1", "1 ", "--1", "1.5"])
def test_is_valid_number_rejects(text):
    assert is_valid_number(text) is False


@pytest.mark.parametrize("text", ["2147483647", "-2147483648", "0", "-17"])
def test_atoi_safe_limits(text):
    assert atoi_safe(text) == int(text)


def test_atoi_safe_skips_leading_whitespace():
    assert atoi_safe("  5") == 5


def test_atoi_safe_lone_sign_is_zero():
    assert atoi_safe("+") == 0


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "12a", "1 2"])
def test_atoi_safe_rejects(text):
    with pytest.raises(InputError):
        atoi_safe(text)


def test_validate_input_empty_and_none():
    assert validate_input([]) is False
    assert validate_input(None) is False


def test_validate_input_mixed():
    assert validate_input(["1", "-2", "+3"]) is True
    assert validate_input(["1", "x"]) is False


def test_build_stack_first_token_on_top():
    stack = build_stack(["3", "1", "2"])
    assert list(stack) == [3, 1, 2]
    assert stack.top() == 3
    assert len(stack) == 3


def test_build_stack_raises_on_overflow():
    with pytest.raises(InputError):
        build_stack(["1", "99999999999"])


def test_has_duplicates():
    assert has_duplicates(Stack([1, 2, 1])) is True
    assert has_duplicates(Stack([1, 2, 3])) is False
    assert has_duplicates(Stack()) is False
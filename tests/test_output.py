import io

import pytest

from pushswap.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_writes_one_char():
    stream = io.StringIO()
    assert putchar_fd("x", stream) == 1
    assert stream.getvalue() == "x"


def test_putchar_rejects_multiple_chars():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putchar_rejects_empty():
    with pytest.raises(ValueError):
        putchar_fd("", io.StringIO())


def test_putstr_writes_text():
    stream = io.StringIO()
    putstr_fd("pa", stream)
    putstr_fd("pb", stream)
    assert stream.getvalue() == "papb"


def test_putendl_appends_newline():
    stream = io.StringIO()
    putendl_fd("Error", stream)
    assert stream.getvalue() == "Error\n"


def test_putendl_empty_is_newline():
    stream = io.StringIO()
    putendl_fd("", stream)
    assert stream.getvalue() == "\n"


@pytest.mark.parametrize("text", ["0", "7", "42", "2147483647", "-1", "-2147483648"])
def test_putnbr_round_trip(text):
    stream = io.StringIO()
    putnbr_fd(int(text), stream)
    assert stream.getvalue() == text
    assert int(stream.getvalue()) == int(text)


def test_putnbr_int_min():
    stream = io.StringIO()
    putnbr_fd(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"
"""Writing characters, strings, lines and integers to a text stream."""

from __future__ import annotations

from typing import TextIO

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def putchar_fd(char: str, stream: TextIO) -> int:
    """Write a single character to ``stream``; return the number written."""
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    return stream.write(char)


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` to ``stream``."""
    stream.write(text)


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    putstr_fd(text, stream)
    putchar_fd("\n", stream)


def putnbr_fd(number: int, stream: TextIO) -> None:
    """Write ``number`` in decimal to ``stream``."""
    if number < 0:
        putchar_fd("-", stream)
        number = -number
    putstr_fd(str(number), stream)
"""Turning command-line words into a validated stack of integers."""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from pushswap.stack import Stack

__all__ = [
    "InputError",
    "split_words",
    "atoi",
    "parse_input",
    "is_valid_number",
    "atoi_safe",
    "validate_input",
    "build_stack",
    "has_duplicates",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_STRICT_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the program's input is not a list of distinct integers."""


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def split_words(text: str, delimiter: str = " ") -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty words."""
    return [word for word in text.split(delimiter) if word]


def atoi(text: str) -> int:
    """Read a leading integer, C style: whitespace, one sign, digits; wraps to 32 bits."""
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def parse_input(args: Sequence[str]) -> Optional[list[str]]:
    """Return the number tokens: one argument is split on spaces, several are used as given.

    Returns None when there are no arguments at all.
    """
    if not args:
        return None
    if len(args) == 1:
        return split_words(args[0], " ")
    return list(args)


def is_valid_number(text: str) -> bool:
    """Return True for an optional sign followed by at least one ASCII digit."""
    return _STRICT_NUMBER.fullmatch(text) is not None


def atoi_safe(text: str) -> int:
    """Convert ``text`` to a 32-bit integer, raising InputError on junk or overflow."""
    match = _LEADING_NUMBER.fullmatch(text)
    if match is None:
        raise InputError(f"not a number: {text!r}")
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def validate_input(tokens: Optional[Sequence[str]]) -> bool:
    """Return True if there is at least one token and every token is a number."""
    if not tokens:
        return False
    return all(is_valid_number(token) for token in tokens)


def build_stack(tokens: Iterable[str]) -> Stack:
    """Build a stack whose top is the first token."""
    return Stack(atoi_safe(token) for token in tokens)


def has_duplicates(stack: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in stack:
        if value in seen:
            return True
        seen.add(value)
    return False
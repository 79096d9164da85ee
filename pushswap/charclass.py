"""ASCII character classification on integer character codes."""

from __future__ import annotations

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "tolower",
    "toupper",
]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def isalpha(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter."""
    return code in _UPPER or code in _LOWER


def isdigit(code: int) -> bool:
    """Return True if ``code`` is an ASCII decimal digit."""
    return code in _DIGITS


def isalnum(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter or digit."""
    return isdigit(code) or isalpha(code)


def isascii(code: int) -> bool:
    """Return True if ``code`` lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def isprint(code: int) -> bool:
    """Return True if ``code`` is a printable ASCII character, space included."""
    return 32 <= code <= 126


def tolower(code: int) -> int:
    """Map an uppercase ASCII letter to lowercase; other codes are unchanged."""
    return code + _CASE_OFFSET if code in _UPPER else code


def toupper(code: int) -> int:
    """Map a lowercase ASCII letter to uppercase; other codes are unchanged."""
    return code - _CASE_OFFSET if code in _LOWER else code
"""String helpers with the semantics of the classic C string routines."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, TypeVar

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strdup",
    "strjoin",
    "substr",
    "strtrim",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strmapi",
    "striteri",
    "itoa",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_T = TypeVar("_T")


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    return char


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the terminator ``"\\0"`` yields ``len(text)``.
    """
    if _single_char(char) == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the terminator ``"\\0"`` yields ``len(text)``.
    """
    if _single_char(char) == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None when both are None."""
    if first is None and second is None:
        return None
    if first is None or second is None:
        raise TypeError("cannot join a string with None")
    return first + second


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters.

    Returns the difference of the first differing character codes, treating
    the end of a string as code 0, or 0 when the compared parts are equal.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    for index in range(length):
        left = _code_at(first, index)
        right = _code_at(second, index)
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or None. An empty needle is found at 0."""
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length of ``src``. With a size of 0
    the destination is left as it was.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had; when ``dst`` already fills the buffer it is left unchanged and the
    length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    buffer: MutableSequence[_T], func: Callable[[int, _T], Optional[_T]]
) -> None:
    """Call ``func(index, item)`` on each item of ``buffer`` in place.

    A returned value replaces the item; None leaves it unchanged.
    """
    for index, item in enumerate(list(buffer)):
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)
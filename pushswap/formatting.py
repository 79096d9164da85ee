"""A small printf with the conversions %c %s %d %i %x %X %u %p."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

__all__ = ["format_digit", "format_unsigned", "format_spec", "sprintf", "printf"]

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_CONSUMING = frozenset("csdixXup")
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _digits(number: int, base: int, symbols: str) -> str:
    if not 2 <= base <= len(symbols):
        raise ValueError(f"unsupported base: {base}")
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(symbols[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def format_digit(number: int, base: int, upper: bool = False) -> str:
    """Render a signed integer in ``base`` (2 to 16)."""
    if number < 0:
        return "-" + format_digit(-number, base, upper)
    return _digits(number, base, _UPPER_DIGITS if upper else _LOWER_DIGITS)


def format_unsigned(number: int, base: int) -> str:
    """Render a non-negative integer in ``base`` with lowercase digits."""
    if number < 0:
        raise ValueError("number must not be negative")
    return _digits(number, base, _LOWER_DIGITS)


def _as_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def format_spec(specifier: str, argument: Any = None) -> str:
    """Render one conversion; an unknown specifier stands for itself."""
    if specifier == "c":
        if isinstance(argument, str):
            return argument[:1]
        return chr(argument & 0xFF)
    if specifier == "s":
        return "(null)" if argument is None else str(argument)
    if specifier in ("d", "i"):
        return format_digit(_as_int32(argument), 10)
    if specifier == "x":
        return format_digit(argument & _UINT32, 16, False)
    if specifier == "X":
        return format_digit(argument & _UINT32, 16, True)
    if specifier == "u":
        return format_unsigned(argument & _UINT32, 10)
    if specifier == "p":
        return "0x" + format_unsigned(argument & _UINT64, 16)
    return specifier


def sprintf(form: str, *args: Any) -> str:
    """Format ``args`` according to ``form`` and return the text."""
    pieces = []
    remaining = iter(args)
    chars = iter(form)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        specifier = next(chars, None)
        if specifier is None:
            raise ValueError("format ends with a lone '%'")
        argument = None
        if specifier in _CONSUMING:
            try:
                argument = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for '%{specifier}'") from None
        pieces.append(format_spec(specifier, argument))
    return "".join(pieces)


def printf(form: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default); return its length."""
    text = sprintf(form, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)
"""Byte-buffer helpers: fill, zero, allocate, search, compare, copy and move."""

from __future__ import annotations

from typing import Optional, Union

__all__ = ["memset", "bzero", "calloc", "memchr", "memcmp", "memcpy", "memmove"]

Bytes = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *sizes: int) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if any(length > size for size in sizes):
        raise ValueError(f"length {length} runs past the end of a buffer")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_length(length, len(buffer))
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Bytes, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of ``value``
    among the first ``length`` bytes, or None."""
    _check_length(length, len(data))
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, length: int) -> int:
    """Compare the first ``length`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0 if none differ.
    """
    _check_length(length, len(first), len(second))
    for left, right in zip(bytes(first[:length]), bytes(second[:length])):
        if left != right:
            return left - right
    return 0


def memcpy(dst: bytearray, src: Bytes, length: int) -> bytearray:
    """Copy ``length`` bytes from the start of ``src`` to the start of ``dst``."""
    _check_length(length, len(dst), len(src))
    dst[:length] = bytes(src[:length])
    return dst


def memmove(
    buffer: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Move ``length`` bytes inside ``buffer``; overlapping regions are handled."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, len(buffer) - dst_offset, len(buffer) - src_offset)
    if dst_offset != src_offset:
        chunk = bytes(buffer[src_offset : src_offset + length])
        buffer[dst_offset : dst_offset + length] = chunk
    return buffer
"""Byte-buffer operations: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_size(size: int, *lengths: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    for length in lengths:
        if size > length:
            raise ValueError(f"size {size} exceeds buffer length {length}")


def memset(buffer: bytearray, value: int, size: int) -> bytearray:
    """Set the first ``size`` bytes of ``buffer`` to ``value`` (low 8 bits)."""
    _check_size(size, len(buffer))
    buffer[:size] = bytes([value & 0xFF]) * size
    return buffer


def bzero(buffer: bytearray, size: int) -> bytearray:
    """Zero the first ``size`` bytes of ``buffer``."""
    return memset(buffer, 0, size)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: Bytes, size: int) -> bytearray:
    """Copy the first ``size`` bytes of ``src`` into the start of ``dst``."""
    _check_size(size, len(dst), len(src))
    dst[:size] = bytes(src[:size])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, size: int) -> bytearray:
    """Copy ``size`` bytes within ``buffer`` from one offset to another; the regions may overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_size(size, len(buffer) - dst_offset, len(buffer) - src_offset)
    buffer[dst_offset:dst_offset + size] = bytes(buffer[src_offset:src_offset + size])
    return buffer


def memchr(data: Bytes, value: int, size: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within the first ``size`` bytes, or None."""
    _check_size(size, len(data))
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(bytes(data[:size])) if byte == target),
        None,
    )


def memcmp(first: Bytes, second: Bytes, size: int) -> int:
    """Compare the first ``size`` bytes; return the difference of the first unequal pair, or 0."""
    _check_size(size, len(first), len(second))
    pairs = zip(bytes(first[:size]), bytes(second[:size]))
    return next((a - b for a, b in pairs if a != b), 0)
"""Bit-level encoding of ASCII text sent one signal per bit, most significant bit first."""

from __future__ import annotations

from typing import Iterator, Optional, Union

BITS_PER_CHAR = 8


def validate_ascii(message: Union[str, bytes]) -> bytes:
    """Return ``message`` as bytes, raising ValueError if it holds a non-ASCII character."""
    if isinstance(message, str):
        data = message.encode("utf-8")
    elif isinstance(message, (bytes, bytearray)):
        data = bytes(message)
    else:
        raise TypeError(f"expected str or bytes, got {type(message).__name__}")
    if any(byte > 127 for byte in data):
        raise ValueError("only ASCII characters are supported")
    return data


def encode_bits(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of every character of ``message``, most significant bit first."""
    for byte in validate_ascii(message):
        for shift in reversed(range(BITS_PER_CHAR)):
            yield (byte >> shift) & 1


class BitDecoder:
    """Collects bits, most significant first, and hands back a character every eighth bit."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: int) -> Optional[str]:
        """Add one bit; return the completed character, or None while one is still being built."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_CHAR:
            return None
        char = chr(self._value & 0xFF)
        self._value = 0
        self._count = 0
        return char
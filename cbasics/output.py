"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import TextIO, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def putchar_fd(char: CharLike, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_char(char))


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` to ``stream``."""
    stream.write(text)


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    stream.write(text)
    stream.write("\n")


def putnbr_fd(number: int, stream: TextIO) -> None:
    """Write the decimal form of an integer to ``stream``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected int, got {type(number).__name__}")
    stream.write(str(number))
"""String helpers: parsing and formatting integers, searching, slicing, joining and mapping."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return a one-character string from a character or a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a decimal integer after optional whitespace and one optional sign.

    Parsing stops at the first non-digit; a string without digits gives 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected int, got {type(number).__name__}")
    return str(number)


def split(text: str, separator: CharLike) -> list[str]:
    """Split ``text`` on a single separator character, dropping empty pieces."""
    sep = _char(separator)
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``char``; NUL matches the end of the string."""
    target = _char(char)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``char``; NUL matches the end of the string."""
    target = _char(char)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, size: int) -> int:
    """Compare at most ``size`` characters; return the code difference at the first mismatch, or 0."""
    _non_negative("size", size)
    for a, b in zip_longest(first[:size], second[:size], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy into a buffer of ``size`` slots (one kept for the terminator).

    Returns the copied text and the full length of ``src``.
    """
    _non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would have,
    counting ``dst`` as at most ``size`` long.
    """
    _non_negative("size", size)
    if size == 0:
        return dst, len(src)
    dst_len = min(len(dst), size)
    if len(dst) >= size:
        return dst, dst_len + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], dst_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> MutableSequence[str]:
    """Replace each element of ``chars`` in place with ``func(index, char)``; return ``chars``."""
    if chars is None or func is None:
        return chars
    for index, ch in enumerate(list(chars)):
        chars[index] = func(index, ch)
    return chars
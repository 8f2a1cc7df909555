"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_LOWER_HEX = "0123456789abcdef"
_MISSING = object()


def _take(args: Iterator[Any], spec: str) -> Any:
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    return value


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} requires an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "s":
        value = _take(args, spec)
        return "(null)" if value is None else str(value)
    if spec == "c":
        value = _take(args, spec)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c requires a single character, got {value!r}")
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec in ("d", "i"):
        return str(_signed32(_as_int(_take(args, spec), spec)))
    if spec == "u":
        return str(_as_int(_take(args, spec), spec) & 0xFFFFFFFF)
    if spec in ("x", "X"):
        digits = format(_as_int(_take(args, spec), spec) & 0xFFFFFFFF, "x")
        return digits.upper() if spec == "X" else digits
    if spec == "p":
        address = _as_int(_take(args, spec), spec) & 0xFFFFFFFFFFFFFFFF
        return "(nil)" if address == 0 else "0x" + format(address, "x")
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    An unknown conversion character is dropped and consumes no argument.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    arguments = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)
"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _wrap_int32(value: int) -> int:
    value &= _MASK32
    return value - 2**32 if value >= 2**31 else value


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None:
        return "0x0"
    address = value if isinstance(value, int) else id(value)
    address &= _MASK64
    if address == 0:
        return "0x0"
    return f"0x{address:x}"


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next_arg(values))
    if spec == "s":
        value = _next_arg(values)
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(_next_arg(values))
    if spec in ("d", "i"):
        return str(_wrap_int32(int(_next_arg(values))))
    if spec == "u":
        return str(int(_next_arg(values)) & _MASK32)
    if spec == "x":
        return f"{int(_next_arg(values)) & _MASK32:x}"
    if spec == "X":
        return f"{int(_next_arg(values)) & _MASK32:X}"
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt``.

    Unknown conversions produce nothing and consume no argument.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)
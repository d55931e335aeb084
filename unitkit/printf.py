"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


def _int_arg(value: Any, letter: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{letter} expects an int, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_int_arg(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _int_arg(value, "p") & _PTR_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(letter: str, args: Iterator[Any]) -> str:
    if letter == "%":
        return "%"
    if letter not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"not enough arguments for %{letter}") from None
    if letter == "c":
        return _char(value)
    if letter == "s":
        return _string(value)
    if letter == "p":
        return _pointer(value)
    if letter in "di":
        return str(_as_int32(_int_arg(value, letter)))
    unsigned = _int_arg(value, letter) & _UINT_MASK
    if letter == "u":
        return str(unsigned)
    return format(unsigned, letter)


def render(fmt: str, *args: Any) -> str:
    """The text that :func:`printf` would write for ``fmt`` and ``args``.

    Unknown conversion letters produce nothing and consume no argument;
    a lone ``%`` at the end of the format is an error.
    """
    if fmt is None:
        raise FormatError("format string is missing")
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    end = fmt.find("\0")
    if end >= 0:
        fmt = fmt[:end]
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        letter = next(chars, None)
        if letter is None:
            raise FormatError("format ends with an incomplete conversion")
        pieces.append(_convert(letter, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)
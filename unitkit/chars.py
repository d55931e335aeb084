"""Character classification and case conversion on the ASCII range.

Every function accepts either an integer character code or a one-character
string. Classifiers return a bool; converters return a value of the same
kind as their argument.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, low: str, high: str, offset: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += offset
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Map a lower-case ASCII letter to upper case; anything else is unchanged."""
    return _convert(c, "a", "z", -32)


def tolower(c: CharLike) -> CharLike:
    """Map an upper-case ASCII letter to lower case; anything else is unchanged."""
    return _convert(c, "A", "Z", 32)
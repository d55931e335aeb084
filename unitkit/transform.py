"""Functions that build new strings from existing ones."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from offset ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of ``s1`` and ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """The non-empty words of ``s`` separated by the character ``sep``."""
    _require_str(s, "s")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for every character of ``s``."""
    _require_str(s, "s")
    if not callable(f):
        raise TypeError("f must be callable")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, Any], Any]) -> None:
    """Apply ``f(index, char)`` to each element of ``s`` in place.

    ``s`` is a mutable sequence such as a list of characters or a
    bytearray; iteration stops at a NUL element. A non-None result of
    ``f`` replaces the element.
    """
    if s is None:
        raise TypeError("s must be a mutable sequence")
    if not callable(f):
        raise TypeError("f must be callable")
    for index, item in enumerate(s):
        if item in (0, "\0"):
            break
        result = f(index, item)
        if result is not None:
            s[index] = result
"""Writing characters, strings and numbers to a stream."""

from __future__ import annotations

import io
import sys
from typing import IO, Optional, Union

from unitkit.convert import itoa


def _skip(stream) -> bool:
    """True when there is nowhere to write: no stream, or standard input."""
    return stream is None or stream is sys.stdin


def _write(stream: IO, text: str) -> None:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(text.encode("utf-8"))
    else:
        stream.write(text)


def putchar_fd(c: Union[str, int], stream: Optional[IO]) -> None:
    """Write a single character, given as a one-character str or a byte code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        text = c
    elif isinstance(c, int):
        text = chr(c & 0xFF)
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    if stream is None:
        return
    _write(stream, text)


def putstr_fd(s: Optional[str], stream: Optional[IO]) -> None:
    """Write ``s``; nothing is written for a missing string or stream."""
    if s is None or _skip(stream):
        return
    _write(stream, s)


def putendl_fd(s: Optional[str], stream: Optional[IO]) -> None:
    """Write ``s`` followed by a newline; nothing for a missing string or stream."""
    if s is None or stream is None:
        return
    _write(stream, s)
    _write(stream, "\n")


def putnbr_fd(n: int, stream: Optional[IO]) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    text = itoa(n)
    if _skip(stream):
        return
    _write(stream, text)
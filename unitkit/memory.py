"""Byte-buffer operations on writable objects supporting the buffer protocol."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _view(buf, n: int) -> memoryview:
    view = memoryview(buf).cast("B")
    if n < 0 or n > len(view):
        raise IndexError(f"length {n} out of range for buffer of {len(view)} bytes")
    return view


def memset(buf, c: int, length: int):
    """Fill the first ``length`` bytes of ``buf`` with ``c`` (truncated to a byte)."""
    view = _view(buf, length)
    view[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` into the start of ``dst``."""
    target = _view(dst, n)
    source = _view(src, n)
    target[:n] = source[:n]
    return dst


def memmove(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dst``; safe when the buffers overlap."""
    source = bytes(_view(src, n)[:n])
    target = _view(dst, n)
    target[:n] = source
    return dst


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Offset of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    view = _view(buf, n)
    offset = bytes(view[:n]).find(c & 0xFF)
    return None if offset < 0 else offset


def memcmp(s1, s2, n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0 when they match."""
    a = bytes(_view(s1, n)[:n])
    b = bytes(_view(s2, n)[:n])
    for x, y in zip(a, b):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zeroed buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must be non-negative")
    if nmemb != 0 and size > SIZE_MAX // nmemb:
        raise OverflowError("requested allocation size overflows")
    return bytearray(nmemb * size)
"""NUL-terminated string operations.

Text arguments may be ``str`` or bytes-like objects. In both cases the
string ends at the first NUL character, as a C string does. Positions are
returned as offsets, and None is returned where nothing was found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

Text = Union[str, bytes, bytearray, memoryview]


def _cstr(s: Text) -> Union[str, bytes]:
    """The string up to its first NUL, as ``str`` or ``bytes``."""
    if isinstance(s, str):
        end = s.find("\0")
        return s if end < 0 else s[:end]
    if isinstance(s, (bytes, bytearray, memoryview)):
        data = bytes(memoryview(s).cast("B"))
        end = data.find(0)
        return data if end < 0 else data[:end]
    raise TypeError(f"expected a string or bytes-like object, got {type(s).__name__}")


def _as_bytes(s: Text) -> bytes:
    text = _cstr(s)
    return text.encode("utf-8") if isinstance(text, str) else text


def _codes(s: Text) -> list[int]:
    text = _cstr(s)
    return [ord(ch) for ch in text] if isinstance(text, str) else list(text)


def _char(c: Union[int, str], like: Union[str, bytes]) -> Union[str, bytes]:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
    elif isinstance(c, int):
        code = c & 0xFF
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    if isinstance(like, str):
        return chr(code)
    if code > 0xFF:
        raise ValueError(f"character {c!r} does not fit in a byte")
    return bytes([code])


def _writable(dst) -> memoryview:
    view = memoryview(dst).cast("B")
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    return view


def strlen(s: Text) -> int:
    """Number of characters before the terminating NUL."""
    return len(_cstr(s))


def strlcpy(dst, src: Text, size: int) -> int:
    """Copy ``src`` into ``dst`` keeping at most ``size - 1`` bytes plus a NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated.
    """
    data = _as_bytes(src)
    if size < 0:
        raise ValueError("size must be non-negative")
    if size == 0:
        return len(data)
    view = _writable(dst)
    count = min(len(data), size - 1)
    if count + 1 > len(view):
        raise IndexError(f"destination of {len(view)} bytes is too small")
    view[:count] = data[:count]
    view[count] = 0
    return len(data)


def strlcat(dst, src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst`` within a total of ``size`` bytes.

    Returns the initial length of ``dst`` (bounded by ``size``) plus the
    length of ``src``.
    """
    data = _as_bytes(src)
    if size < 0:
        raise ValueError("size must be non-negative")
    view = _writable(dst)
    start = bytes(view[:size]).find(0)
    if start < 0:
        if size > len(view):
            raise IndexError("destination holds no terminating NUL within its bounds")
        start = size
    count = max(0, min(len(data), size - start - 1))
    terminated = start != size
    if start + count + (1 if terminated else 0) > len(view):
        raise IndexError(f"destination of {len(view)} bytes is too small")
    view[start:start + count] = data[:count]
    if terminated:
        view[start + count] = 0
    return start + len(data)


def strchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Offset of the first ``c`` in ``s``; NUL matches the terminator."""
    text = _cstr(s)
    ch = _char(c, text)
    if ch in ("\0", b"\0"):
        return len(text)
    found = text.find(ch)
    return None if found < 0 else found


def strrchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Offset of the last ``c`` in ``s``; NUL matches the terminator."""
    text = _cstr(s)
    ch = _char(c, text)
    if ch in ("\0", b"\0"):
        return len(text)
    found = text.rfind(ch)
    return None if found < 0 else found


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must be non-negative")
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
    return 0


def strnstr(big: Text, little: Text, n: int) -> Optional[int]:
    """Offset of ``little`` wholly within the first ``n`` characters of ``big``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    haystack = _cstr(big)
    needle = _cstr(little)
    if type(haystack) is not type(needle):
        raise TypeError("cannot search text and bytes in each other")
    if not needle:
        return 0
    found = haystack.find(needle, 0, n)
    return None if found < 0 else found


def strdup(s: Text) -> Union[str, bytes]:
    """A copy of the string up to its terminating NUL."""
    return _cstr(s)
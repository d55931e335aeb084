"""Test suites exercising the string, memory, conversion and printf modules."""

from __future__ import annotations

import sys

from unitkit.convert import atoi
from unitkit.memory import bzero
from unitkit.output import putstr_fd
from unitkit.printf import printf
from unitkit.runner import TestSuite
from unitkit.strings import strlcpy, strlen, strncmp
from unitkit.transform import split


def _check(condition: bool) -> int:
    return 0 if condition else -1


def _run(title: str, tests) -> bool:
    putstr_fd(f"Test of the {title} function\n", sys.stdout)
    suite = TestSuite()
    for name, func in tests:
        suite.load(name, func)
    return all(outcome.passed for outcome in suite.launch())


def _strlen_basic() -> int:
    return _check(strlen("Hello") == 5)


def _strlen_null() -> int:
    strlen(None)
    return 0


def strlen_launcher() -> bool:
    """Run the strlen suite; True when every test passed."""
    return _run("strlen", [("Basic test", _strlen_basic), ("NULL test", _strlen_null)])


def atoi_launcher() -> bool:
    """Run the atoi suite; True when every test passed."""
    return _run(
        "atoi",
        [
            ("Basic '42'", lambda: _check(atoi("42") == 42)),
            ("Negative '-42'", lambda: _check(atoi("-42") == -42)),
            ("Zero '0'", lambda: _check(atoi("0") == 0)),
            ("Int Max", lambda: _check(atoi("2147483647") == 2147483647)),
            ("Int Min", lambda: _check(atoi("-2147483648") == -2147483648)),
        ],
    )


def _hello_buffer() -> bytearray:
    buffer = bytearray(10)
    strlcpy(buffer, "Hello", 10)
    return buffer


def _bzero_basic() -> int:
    buffer = _hello_buffer()
    bzero(buffer, 2)
    return _check(buffer[0] == 0 and buffer[1] == 0)


def _bzero_integrity() -> int:
    buffer = _hello_buffer()
    bzero(buffer, 2)
    return _check(buffer[2] == ord("l"))


def _bzero_zero_len() -> int:
    buffer = _hello_buffer()
    bzero(buffer, 0)
    return _check(buffer[0] == ord("H"))


def _bzero_null() -> int:
    bzero(None, 10)
    return 0


def bzero_launcher() -> bool:
    """Run the bzero suite; True when every test passed."""
    return _run(
        "bzero",
        [
            ("Basic test", _bzero_basic),
            ("Integrity check", _bzero_integrity),
            ("Length 0", _bzero_zero_len),
            ("NULL ptr crash", _bzero_null),
        ],
    )


def _split_basic() -> int:
    words = split("Hello World", " ")
    return _check(
        len(words) == 2
        and strncmp(words[0], "Hello", 5) == 0
        and strncmp(words[1], "World", 5) == 0
    )


def _split_delimiters() -> int:
    return _check(split("    ", " ") == [])


def _split_null() -> int:
    try:
        split(None, " ")
    except TypeError:
        return 0
    return -1


def _split_force_crash() -> int:
    words = split(None, " ")
    words[0] = "Crash me"
    return 0


def split_launcher() -> bool:
    """Run the split suite; True when every test passed."""
    return _run(
        "split",
        [
            ("Basic test", _split_basic),
            ("Only delimiters", _split_delimiters),
            ("NULL input", _split_null),
            ("Force crash", _split_force_crash),
        ],
    )


def _printf_basic() -> int:
    return _check(printf("Hello, world!\n") == 14)


def printf_launcher() -> bool:
    """Run the printf suite; True when every test passed."""
    return _run("printf", [("Basic test", _printf_basic)])


def main(argv=None) -> int:
    """Run every suite in turn."""
    strlen_launcher()
    atoi_launcher()
    bzero_launcher()
    split_launcher()
    printf_launcher()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
import io

import pytest

from unitkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_writes_string_character():
    buf = io.StringIO()
    putchar_fd("Z", buf)
    assert buf.getvalue() == "Z"


def test_putchar_accepts_code():
    buf = io.StringIO()
    putchar_fd(ord("q"), buf)
    assert buf.getvalue() == "q"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putstr_round_trip():
    buf = io.StringIO()
    text = "hello world"
    putstr_fd(text, buf)
    assert buf.getvalue() == text


def test_putstr_none_writes_nothing():
    buf = io.StringIO()
    putstr_fd(None, buf)
    assert buf.getvalue() == ""


def test_putstr_to_binary_stream():
    buf = io.BytesIO()
    putstr_fd("abc", buf)
    assert buf.getvalue() == "abc".encode()


def test_putendl_appends_newline():
    buf = io.StringIO()
    text = "line"
    putendl_fd(text, buf)
    assert buf.getvalue() == text + "\n"


def test_putendl_none_writes_nothing():
    buf = io.StringIO()
    putendl_fd(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647])
def test_putnbr_round_trip(n):
    buf = io.StringIO()
    putnbr_fd(n, buf)
    assert int(buf.getvalue()) == n


def test_putnbr_int_min():
    buf = io.StringIO()
    putnbr_fd(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_putnbr_out_of_range():
    with pytest.raises(OverflowError):
        putnbr_fd(2**31, io.StringIO())


def test_consecutive_writes_accumulate():
    buf = io.StringIO()
    putstr_fd("n=", buf)
    putnbr_fd(-5, buf)
    putchar_fd("!", buf)
    assert buf.getvalue().startswith("n=")
    assert buf.getvalue().endswith("!")
    assert int(buf.getvalue()[2:-1]) == -5
import pytest

from unitkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


@pytest.fixture
def hello_buffer():
    buf = bytearray(10)
    memcpy(buf, b"Hello", 5)
    return buf


def test_bzero_basic(hello_buffer):
    bzero(hello_buffer, 2)
    assert hello_buffer[0] == 0 and hello_buffer[1] == 0


def test_bzero_integrity(hello_buffer):
    bzero(hello_buffer, 2)
    assert hello_buffer[2] == ord("l")


def test_bzero_zero_length(hello_buffer):
    bzero(hello_buffer, 0)
    assert hello_buffer[0] == ord("H")


def test_bzero_null_buffer():
    with pytest.raises(TypeError):
        bzero(None, 10)


def test_bzero_past_end():
    with pytest.raises(IndexError):
        bzero(bytearray(3), 4)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_readonly_rejected():
    with pytest.raises(TypeError):
        memset(b"abc", 0, 2)


def test_memcpy_copies_n_bytes():
    dst = bytearray(b"......")
    assert memcpy(dst, b"abcdef", 4) is dst
    assert dst == bytearray(b"abcd..")


def test_memmove_overlapping_forward():
    buf = bytearray(b"123456789")
    view = memoryview(buf)
    result = memmove(view[2:], view, 5)
    assert bytes(result[:5]) == b"12345"
    assert buf == bytearray(b"121234589")


def test_memmove_overlapping_backward():
    buf = bytearray(b"123456789")
    view = memoryview(buf)
    result = memmove(view, view[2:], 5)
    assert bytes(result[:5]) == b"34567"
    assert buf == bytearray(b"345676789")


def test_memchr_found_and_missing():
    data = b"hello"
    assert memchr(data, ord("l"), 5) == 2
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("z"), 5) is None


def test_memchr_compares_as_unsigned_byte():
    assert memchr(b"a\xffb", -1, 3) == 1


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_unsigned_difference():
    assert memcmp(b"\x80", b"\x00", 1) == 128


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert all(b == 0 for b in buf)


def test_calloc_zero_members():
    assert calloc(0, 100) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)
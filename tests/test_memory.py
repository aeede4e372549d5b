import pytest

from minitalk.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buffer = bytearray(6)
    result = memset(buffer, ord("A"), 4)
    assert result is buffer
    assert bytes(buffer[:4]) == b"AAAA"
    assert bytes(buffer[4:]) == bytes(2)


def test_memset_truncates_value_to_byte():
    buffer = bytearray(3)
    memset(buffer, 0x100 + ord("z"), 3)
    assert bytes(buffer) == b"zzz"


def test_memset_rejects_overlong_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero_clears_prefix():
    buffer = bytearray(b"hello")
    bzero(buffer, 3)
    assert bytes(buffer) == bytes(3) + b"lo"


def test_calloc_is_zeroed():
    buffer = calloc(3, 4)
    assert len(buffer) == 12
    assert not any(buffer)


def test_calloc_zero_count():
    assert calloc(0, 100) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(1 << 32, 1 << 32)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dest = bytearray(b"xxxxxx")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert bytes(dest) == b"abc" + b"xxx"


def test_memcpy_into_memoryview():
    target = bytearray(4)
    memcpy(memoryview(target)[1:], b"hey", 3)
    assert bytes(target) == b"\x00hey"


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buffer = bytearray(original)
    memmove(buffer, 2, 0, 4)
    assert bytes(buffer) == original[:2] + original[0:4]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buffer = bytearray(original)
    memmove(buffer, 0, 2, 4)
    assert bytes(buffer) == original[2:6] + original[4:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_count():
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"hello", ord("o"), 5) == 4


def test_memchr_value_as_unsigned_byte():
    assert memchr(b"\x00\xff", -1, 2) == 1


def test_memcmp_equal_and_count():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abX", b"abY", 2) == 0
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_sign_of_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_is_antisymmetric():
    first, second = b"\x10\x20\x30", b"\x10\x25\x01"
    assert memcmp(first, second, 3) == -memcmp(second, first, 3)


def test_memcmp_rejects_overlong_count():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)
import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    mem_compare,
    mem_copy,
    mem_find,
    mem_move,
    mem_set,
)


def test_mem_set_fills_prefix():
    buf = bytearray(b"abcdef")
    result = mem_set(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_mem_set_wraps_value():
    buf = bytearray(2)
    mem_set(buf, 256 + 7, 2)
    assert list(buf) == [7, 7]


def test_mem_set_too_long():
    with pytest.raises(ValueError):
        mem_set(bytearray(2), 1, 3)


@given(st.binary(min_size=1), st.data())
def test_bzero_zeroes_prefix_only(data, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    bzero(buf, n)
    assert buf[:n] == bytearray(n)
    assert buf[n:] == bytearray(data[n:])


@given(st.integers(0, 50), st.integers(0, 50))
def test_calloc_size_and_zeroed(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert not any(buf)


def test_calloc_rejects_size_max():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 1)
    with pytest.raises(MemoryError):
        calloc(1, SIZE_MAX)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


@given(st.binary(), st.data())
def test_mem_copy_copies_prefix(src, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(src)))
    dst = bytearray(len(src))
    mem_copy(dst, src, n)
    assert dst[:n] == bytearray(src[:n])
    assert dst[n:] == bytearray(len(src) - n)


def test_mem_copy_rejects_overrun():
    with pytest.raises(ValueError):
        mem_copy(bytearray(2), b"abc", 3)


def test_mem_move_forward_overlap():
    buf = bytearray(b"123456789")
    view = memoryview(buf)
    result = mem_move(view[2:], view[:7], 7)
    assert bytes(result) == b"1234567"
    assert buf == bytearray(b"121234567")


def test_mem_move_backward_overlap():
    buf = bytearray(b"123456789")
    view = memoryview(buf)
    result = mem_move(view[:7], view[2:], 7)
    assert bytes(result) == b"3456789"
    assert buf == bytearray(b"345678989")


def test_mem_find():
    data = b"hello world"
    assert mem_find(data, ord("o"), len(data)) == data.index(b"o")
    assert mem_find(data, ord("w"), 5) is None
    assert mem_find(data, ord("z"), len(data)) is None


@given(st.binary(min_size=1))
def test_mem_find_locates_each_byte(data):
    for value in set(data):
        index = mem_find(data, value, len(data))
        assert data[index] == value
        assert value not in data[:index]


@given(st.binary())
def test_mem_compare_equal(data):
    assert mem_compare(data, bytes(data), len(data)) == 0


@given(st.binary(min_size=1), st.binary(min_size=1))
def test_mem_compare_antisymmetric(a, b):
    n = min(len(a), len(b))
    forward = mem_compare(a, b, n)
    assert mem_compare(b, a, n) == -forward
    assert (forward == 0) == (a[:n] == b[:n])


def test_mem_compare_sign_and_bound():
    assert mem_compare(b"abc", b"abd", 3) < 0
    assert mem_compare(b"abd", b"abc", 3) > 0
    assert mem_compare(b"abc", b"abd", 2) == 0
    assert mem_compare(b"\x80", b"\x00", 1) == 128
"""Byte-buffer helpers: fill, zero, allocate, copy, search and compare."""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

Writable = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer size {len(buf)}")


def mem_set(buf: Writable, value: int, length: int) -> Writable:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Writable, length: int) -> Writable:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    return mem_set(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == SIZE_MAX or size == SIZE_MAX:
        raise MemoryError("requested allocation is too large")
    return bytearray(count * size)


def mem_copy(dst: Writable, src: Readable, n: int) -> Writable:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def mem_move(dst: Writable, src: Readable, n: int) -> Writable:
    """Copy ``n`` bytes from ``src`` to ``dst``; correct when the two overlap."""
    _check_length(n, dst, src)
    # Snapshot the source first so overlapping views of one buffer stay intact.
    data = bytes(src[:n])
    dst[:n] = data
    return dst


def mem_find(buf: Readable, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def mem_compare(a: Readable, b: Readable, n: int) -> int:
    """Difference of the first differing bytes within ``n``; 0 when equal."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0
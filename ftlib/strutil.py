"""String length, copying, bounded copy/concatenation, joining and mapping."""

from __future__ import annotations

from typing import Callable, Optional


def length(s: Optional[str]) -> int:
    """Length of ``s``; None counts as the empty string."""
    return len(s) if s is not None else 0


def duplicate(s: Optional[str]) -> str:
    """Return a copy of ``s``; None gives the empty string."""
    return "" if s is None else str(s)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def copy_bounded(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one of them kept for the end.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, which shows whether the copy was truncated.
    """
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def concat_bounded(dst: Optional[str], src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have.
    When ``dst`` already fills the buffer nothing is appended and the
    returned length is ``len(src) + size``.
    """
    _check_size(size)
    if dst is None:
        if size == 0:
            return "", 0
        raise TypeError("dst must be a string when size is not zero")
    dst_len = len(dst)
    src_len = len(src)
    if dst_len + 1 > size:
        return dst, src_len + size
    room = size - dst_len - 1
    return dst + src[:room], dst_len + src_len


def join(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    if a is None or b is None:
        raise TypeError("join needs two strings")
    return a + b


def concat(*args: Optional[str]) -> str:
    """Concatenate the arguments, stopping at the first None after the first.

    A None first argument counts as the empty string.
    """
    if not args:
        return ""
    first, *rest = args
    parts = [duplicate(first)]
    for arg in rest:
        if arg is None:
            break
        parts.append(arg)
    return "".join(parts)


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for every character of ``s``."""
    if s is None:
        raise TypeError("map_indexed needs a string")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def for_each_indexed(s: Optional[str], func: Callable[[int, str], Optional[str]]) -> Optional[str]:
    """Call ``func(index, char)`` for every character of ``s``.

    A value returned by ``func`` replaces that character; None leaves it
    unchanged. Returns the resulting string, or None when ``s`` is None.
    """
    if s is None:
        return None
    result = []
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)
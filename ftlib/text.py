"""String parsing, splitting, trimming, slicing, searching and comparison."""

from __future__ import annotations

from itertools import groupby, islice, zip_longest
from typing import Optional, Union

Char = Union[str, int]

_ATOI_SPACES = " \t\n\v\f\r"


def _as_char(c: Char) -> str:
    """Normalise a character given as a one-character string or a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c)


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. A string with no digits gives 0.
    """
    rest = s.lstrip(_ATOI_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(s: str, delimiters: str) -> list[str]:
    """Split ``s`` on any character of ``delimiters``, dropping empty pieces."""
    delimiter_set = set(delimiters)
    return [
        "".join(group)
        for is_delimiter, group in groupby(s, key=lambda ch: ch in delimiter_set)
        if not is_delimiter
    ]


def _trim_bounds(s: str, charset: str) -> tuple[int, int]:
    front = len(s) - len(s.lstrip(charset))
    back = front + len(s[front:].rstrip(charset))
    return front, back


def trim(s: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``s``."""
    front, back = _trim_bounds(s, charset)
    return s[front:back]


def trim_keep_space(s: str, charset: str) -> str:
    """Trim like :func:`trim`, but keep one space bordering the kept text.

    If the character just before the kept part is a space it is kept, and
    likewise for the character just after it.
    """
    front, back = _trim_bounds(s, charset)
    if front > 0 and s[front - 1] == " ":
        front -= 1
    if back < len(s) and s[back] == " ":
        back += 1
    return s[front:back]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if not length or not s or start >= len(s):
        return ""
    return s[start:start + length]


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly in the first ``length`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def _difference(a: str, b: str, limit: Optional[int]) -> int:
    pairs = zip_longest(a, b, fillvalue="\0")
    if limit is not None:
        pairs = islice(pairs, limit)
    for x, y in pairs:
        if x != y:
            return ord(x) - ord(y)
    return 0


def compare(a: str, b: str) -> int:
    """Compare two strings: negative, zero or positive like their first difference."""
    return _difference(a, b, None)


def compare_n(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return _difference(a, b, n)


def find_char(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``; a NUL character is found at ``len(s)``."""
    ch = _as_char(c)
    if ch == "\0" and "\0" not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def rfind_char(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; a NUL character is found at ``len(s)``."""
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index
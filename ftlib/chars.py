"""Character classification and case conversion for ASCII characters.

Every function that takes a single character accepts a one-character
string or an integer code point. Case conversion returns a value of the
same kind it was given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACE_CODES = frozenset(map(ord, " \t\n\r\f\v"))


def _code(c: Char) -> int:
    """Return the integer code of a character given as str or int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def _as_input_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for space, tab, newline, carriage return, form feed or vertical tab."""
    return _code(c) in _SPACE_CODES


def is_number(s: str) -> bool:
    """True when every character of ``s`` is a digit; an empty string counts."""
    return all(is_digit(ch) for ch in s)


def is_only_whitespace(s: str) -> bool:
    """True when ``s`` holds nothing but whitespace; an empty string counts."""
    return all(is_space(ch) for ch in s)


def has_spaces_on_sides(s: str) -> bool:
    """True when ``s`` starts or ends with whitespace."""
    if not s:
        return False
    return is_space(s[0]) or is_space(s[-1])


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lowercase letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _as_input_kind(c, code)


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII uppercase letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _as_input_kind(c, code)


def to_lowercase(s: str) -> str:
    """Return ``s`` with its ASCII uppercase letters lower-cased."""
    return "".join(to_lower(ch) for ch in s)
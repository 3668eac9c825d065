"""Formatted output with a small set of conversions, plus simple writers.

Supported conversions:

``%c``
    A character, given as a one-character string or an integer code.
``%s``
    A string; None prints as ``(null)``.
``%d``, ``%i``
    A signed 32-bit decimal integer.
``%u``
    An unsigned 32-bit decimal integer.
``%x``, ``%X``
    An unsigned 32-bit integer in lower- or upper-case hexadecimal.
``%p``
    An address: ``0x`` followed by the 64-bit value in lower-case hex.
``%%``
    A literal percent sign.

Any other character after ``%`` produces no output and consumes no
argument. A ``%`` at the very end of the format string ends the output.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_STRING = "(null)"
POINTER_PREFIX = "0x"

_UINT32 = 2**32
_UINT64 = 2**64


def _check_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError(f"a base needs at least two digits, got {base!r}")


def _check_natural(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def base_length(n: int, base: str) -> int:
    """Number of digits ``n`` takes when written with the digits of ``base``."""
    _check_natural(n)
    _check_base(base)
    radix = len(base)
    digits = 1
    while n >= radix:
        n //= radix
        digits += 1
    return digits


def number_in_base(n: int, base: str) -> str:
    """Write the non-negative ``n`` with the digits of ``base``."""
    _check_natural(n)
    _check_base(base)
    radix = len(base)
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an integer, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= 2**31 else value


def _convert(conversion: str, value: Any) -> str:
    if conversion == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c needs a single character, got {value!r}")
            return value
        return chr(_require_int(value, conversion) & 0xFF)
    if conversion == "s":
        if value is None:
            return NULL_STRING
        if not isinstance(value, str):
            raise TypeError(f"%s needs a string, got {type(value).__name__}")
        return value
    if conversion in ("d", "i"):
        number = _as_int32(_require_int(value, conversion))
        sign = "-" if number < 0 else ""
        return sign + number_in_base(abs(number), DECIMAL)
    if conversion == "u":
        return number_in_base(_require_int(value, conversion) % _UINT32, DECIMAL)
    if conversion in ("x", "X"):
        base = HEX_UPPER if conversion == "X" else HEX_LOWER
        return number_in_base(_require_int(value, conversion) % _UINT32, base)
    if conversion == "p":
        address = _require_int(value, conversion) % _UINT64
        return POINTER_PREFIX + number_in_base(address, HEX_LOWER)
    raise ValueError(f"unknown conversion %{conversion}")


_CONVERSIONS = frozenset("csdiuxXp")


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, None)
        if conversion is None:
            return
        if conversion == "%":
            yield "%"
        elif conversion in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for conversion %{conversion}"
                ) from None
            yield _convert(conversion, value)


def format(fmt: str, *args: Any) -> str:  # noqa: A001
    """Return ``fmt`` with its conversions replaced by ``args``."""
    return "".join(_pieces(fmt, args))


def _resolve(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    return printf_fd(None, fmt, *args)


def printf_fd(stream: Optional[TextIO], fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream``; return its length."""
    text = format(fmt, *args)
    _resolve(stream).write(text)
    return len(text)


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    _resolve(stream).write(_convert("c", c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is not None:
        _resolve(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; None writes only the newline."""
    out = _resolve(stream)
    put_str(s, out)
    out.write("\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal to ``stream``."""
    n = _require_int(n, "d")
    sign = "-" if n < 0 else ""
    _resolve(stream).write(sign + number_in_base(abs(n), DECIMAL))
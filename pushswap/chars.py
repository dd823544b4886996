"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_WHITESPACE = " \t\n\r\v\f"
_INT_BITS = 32


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code point")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError("expected a character or an integer code point")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) < 127


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, two's complement."""
    span = 1 << _INT_BITS
    value %= span
    return value - span if value >= span // 2 else value


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted and digits are
    read until the first non-digit. Text without digits gives 0. The result
    wraps around like a 32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not is_digit(ch):
            break
        digits.append(ch)
    if not digits:
        return 0
    return _wrap_int(sign * int("".join(digits)))


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("itoa expects an integer")
    return str(n)
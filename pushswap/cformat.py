"""A small printf: %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, Optional

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT32 = 1 << 32
_UINT64 = 1 << 64
_NULL_STR = "(null)"
_NULL_PTR = "(nil)"


def _require_int(value: object, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= _UINT32 // 2 else value


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``n`` taken as an unsigned 64-bit value."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("format_hex expects an integer")
    n %= _UINT64
    if n == 0:
        return "0"
    digits = _HEX_UPPER if upper else _HEX_LOWER
    out = []
    while n:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _conv_str(value: Any) -> str:
    if value is None:
        return _NULL_STR
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string or None, got {type(value).__name__}")
    return value


def _conv_ptr(value: Any) -> str:
    if value is None:
        return _NULL_PTR
    address = _require_int(value, "p")
    if address == 0:
        return _NULL_PTR
    return "0x" + format_hex(address, False)


def _conv_int(value: Any) -> str:
    return str(_to_int32(_require_int(value, "d")))


def _conv_uint(value: Any) -> str:
    return str(_require_int(value, "u") % _UINT32)


def _conv_hex_lower(value: Any) -> str:
    return format_hex(_require_int(value, "x") % _UINT32, False)


def _conv_hex_upper(value: Any) -> str:
    return format_hex(_require_int(value, "X") % _UINT32, True)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_str,
    "p": _conv_ptr,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
    "d": _conv_int,
    "i": _conv_int,
    "u": _conv_uint,
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    conversion: Optional[Callable[[Any], str]] = _CONVERSIONS.get(spec)
    if conversion is None:
        # Unknown conversions produce nothing and consume no argument.
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return conversion(value)


def cformat(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    parts: list[str] = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        parts.append(_convert(spec, arg_iter))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the characters written."""
    text = cformat(fmt, *args)
    sys.stdout.write(text)
    return len(text)
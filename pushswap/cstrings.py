"""Character search, bounded copy and concatenation, mapping and byte comparison."""

from __future__ import annotations

from collections.abc import Callable
from typing import Union

CharLike = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Turn a one-character string or a code point into a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code point")
    if isinstance(c, int):
        if not 0 <= c <= 0x10FFFF:
            raise ValueError(f"code point out of range: {c}")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError("expected a character or an integer code point")


def _byte(c: CharLike) -> int:
    """Turn a code point or a one-character string into a byte value (0-255)."""
    if isinstance(c, bool):
        raise TypeError("expected a byte value or a single character")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, (bytes, bytearray)) and len(c) == 1:
        return c[0]
    if isinstance(c, str) and len(c) == 1:
        return ord(c) & 0xFF
    raise TypeError("expected a byte value or a single character")


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _require_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _require_bytes(value: object, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
    return bytes(value)


def _bounded(data: bytes, n: int, name: str) -> bytes:
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, fewer than {n}")
    return data[:n]


def strchr(s: str, c: CharLike) -> int:
    """Index of the first ``c`` in ``s``, or -1.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    s = _require_str(s, "s")
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    return s.find(ch)


def strrchr(s: str, c: CharLike) -> int:
    """Index of the last ``c`` in ``s``, or -1.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    s = _require_str(s, "s")
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    return s.rfind(ch)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text (at most ``size - 1`` characters) and the length
    of ``src``, which tells whether the copy was truncated.
    """
    src = _require_str(src, "src")
    size = _require_count(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``dst`` already fills the buffer it is returned unchanged together
    with ``size + len(src)``.
    """
    dst = _require_str(dst, "dst")
    src = _require_str(src, "src")
    size = _require_count(size, "size")
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character of ``s``."""
    s = _require_str(s, "s")
    if not callable(func):
        raise TypeError("func must be callable")
    mapped = []
    for index, ch in enumerate(s):
        result = func(index, ch)
        if not isinstance(result, str):
            raise TypeError("func must return a string")
        mapped.append(result)
    return "".join(mapped)


def memchr(data: BytesLike, c: CharLike, n: int) -> int:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes, or -1."""
    data = _require_bytes(data, "data")
    n = _require_count(n, "n")
    return _bounded(data, n, "data").find(_byte(c))


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    a = _bounded(_require_bytes(a, "a"), _require_count(n, "n"), "a")
    b = _bounded(_require_bytes(b, "b"), n, "b")
    for x, y in zip(a, b):
        if x != y:
            return x - y
    return 0
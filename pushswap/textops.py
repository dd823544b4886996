"""String helpers: tokenising, trimming, slicing, joining and bounded search."""

from __future__ import annotations

from collections.abc import Iterator

_NUL = "\0"


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


def _require_sep(sep: object) -> str:
    sep = _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def _tokens(s: str, sep: str) -> Iterator[str]:
    return (token for token in s.split(sep) if token)


def count_tokens(s: str, sep: str) -> int:
    """Count the non-empty runs of ``s`` between occurrences of ``sep``."""
    return sum(1 for _ in _tokens(_require_str(s, "s"), _require_sep(sep)))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty tokens."""
    return list(_tokens(_require_str(s, "s"), _require_sep(sep)))


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    s = _require_str(s, "s")
    charset = _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of ``s`` gives an empty string.
    """
    s = _require_str(s, "s")
    start = _require_count(start, "start")
    length = _require_count(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return _require_str(a, "a") + _require_str(b, "b")


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Find ``needle`` in the first ``length`` characters of ``haystack``.

    Returns the index of the first match that ends within the bound, or -1.
    An empty needle matches at index 0.
    """
    haystack = _require_str(haystack, "haystack")
    needle = _require_str(needle, "needle")
    length = _require_count(length, "length")
    if not needle:
        return 0
    limit = min(length, len(haystack))
    return haystack.find(needle, 0, limit)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the code-point difference at the first mismatch, where the end of
    a string counts as code point 0, or 0 if no mismatch is found.
    """
    a = _require_str(a, "a")
    b = _require_str(b, "b")
    n = _require_count(n, "n")
    for i in range(n):
        ca = a[i] if i < len(a) else _NUL
        cb = b[i] if i < len(b) else _NUL
        if ca == _NUL and cb == _NUL:
            break
        if ca != cb:
            return ord(ca) - ord(cb)
    return 0
"""Checking and reading the command-line numbers."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from itertools import zip_longest

from .chars import is_digit
from .textops import split

INT_MIN = -2147483648
INT_MAX = 2147483647
_MAX_TEXT_LENGTH = 11
_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """The input cannot be sorted: malformed, out of range or duplicated."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def validate_arguments(args: Sequence[str]) -> None:
    """Reject argument lists that hold anything but signed numbers and spaces."""
    if not args:
        raise InputError("")
    for arg in args:
        if not arg or arg[0] == " ":
            raise InputError()
        for ch, following in zip_longest(arg, arg[1:], fillvalue=""):
            if not (is_digit(ch) or ch in " +-"):
                raise InputError()
            if ch in "+-" and following in ("", " "):
                raise InputError()


def parse_number(text: str) -> int:
    """Read one signed 32-bit integer; anything else raises InputError."""
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body or len(text) > _MAX_TEXT_LENGTH:
        raise InputError()
    if not all(is_digit(ch) for ch in body):
        raise InputError()
    value = sign * int(body)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the arguments and read every space-separated number in them."""
    validate_arguments(args)
    return [parse_number(token) for token in split(" ".join(args), " ")]


def has_duplicates(values: Sequence[int]) -> bool:
    """True when some value occurs more than once."""
    return len(set(values)) != len(values)


def index_values(values: Sequence[int]) -> list[int]:
    """Replace each value by the number of values strictly smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]
"""Sorting strategies that drive the stacks and record their moves."""

from __future__ import annotations

from collections.abc import Sequence

from .parsing import InputError, has_duplicates, index_values
from .stacks import Direction, Stacks


def _order_top_three(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds exactly three elements."""
    largest = max(stacks.a)
    if stacks.a[2] != largest:
        if stacks.a[0] == largest:
            stacks.rotate("a", Direction.UP)
        else:
            stacks.rotate("a", Direction.DOWN)
    if stacks.a[0] > stacks.a[1]:
        stacks.swap("sa")


def sort_three(stacks: Stacks) -> None:
    """Sort a three-element stack ``a`` with at most two moves."""
    if len(stacks.a) != 3:
        raise ValueError("sort_three needs exactly three elements")
    _order_top_three(stacks)


def sort_four_to_five(stacks: Stacks) -> None:
    """Sort four or five elements by parking the two smallest on stack ``b``."""
    if len(stacks.a) not in (4, 5) or stacks.b:
        raise ValueError("sort_four_to_five needs four or five elements in a")
    smallest = set(sorted(stacks.a)[:2])
    while len(stacks.b) < 2:
        if stacks.a[0] in smallest:
            stacks.push("pb")
        else:
            stacks.rotate("a", Direction.UP)
    if stacks.b[0] < stacks.b[1]:
        stacks.swap("sb")
    if len(stacks.a) == 3:
        _order_top_three(stacks)
    elif stacks.a[0] > stacks.a[1]:
        stacks.swap("sa")
    stacks.push("pa")
    stacks.push("pa")


def _radix_pass_b(stacks: Stacks, bit_size: int, bit: int) -> None:
    for _ in range(len(stacks.b)):
        if bit > bit_size or stacks.is_sorted():
            break
        if (stacks.b[0] >> bit) & 1 == 0:
            stacks.rotate("b", Direction.UP)
        else:
            stacks.push("pa")
    if stacks.is_sorted():
        while stacks.b:
            stacks.push("pa")


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort of ranks 0..n-1, using stack ``b`` for each bit."""
    if any(value < 0 for value in stacks.a):
        raise ValueError("radix_sort needs non-negative ranks")
    bit_size = 0
    size = len(stacks.a)
    while size > 1:
        bit_size += 1
        size //= 2
    for bit in range(bit_size + 1):
        for _ in range(len(stacks.a)):
            if stacks.is_sorted():
                break
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.push("pb")
            else:
                stacks.rotate("a", Direction.UP)
        _radix_pass_b(stacks, bit_size, bit + 1)
    while stacks.b:
        stacks.push("pa")


def solve(values: Sequence[int]) -> list[str]:
    """Return the moves that sort ``values``.

    Raises InputError for duplicated values and RuntimeError if the chosen
    strategy leaves the stack unsorted.
    """
    if has_duplicates(values):
        raise InputError()
    stacks = Stacks(index_values(values))
    if stacks.is_sorted():
        return []
    count = len(stacks.a)
    if count == 2:
        stacks.swap("sa")
    elif count == 3:
        sort_three(stacks)
    elif count in (4, 5):
        sort_four_to_five(stacks)
    else:
        radix_sort(stacks)
    if not stacks.is_sorted() or stacks.b:
        raise RuntimeError("Error")
    return stacks.operations
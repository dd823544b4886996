"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Optional, TextIO


class Direction(Enum):
    """Which way a rotation moves the elements."""

    UP = "up"
    DOWN = "down"


_SWAPS = {"sa": "a", "sb": "b"}
_PUSHES = {"pa": ("b", "a"), "pb": ("a", "b")}


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is at index 0.

    Every move that takes effect is recorded in ``operations`` and, when an
    output stream is given, written to it as one line.
    """

    def __init__(self, values: Iterable[int], out: Optional[TextIO] = None) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.out = out
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _stack(self, letter: str) -> list[int]:
        if letter == "a":
            return self.a
        if letter == "b":
            return self.b
        raise ValueError(f"unknown stack {letter!r}")

    def _emit(self, operation: str) -> None:
        self.operations.append(operation)
        if self.out is not None:
            self.out.write(operation + "\n")

    def swap(self, name: str) -> None:
        """Exchange the two top elements of a stack ("sa" or "sb")."""
        if name not in _SWAPS:
            raise ValueError(f"unknown swap {name!r}")
        stack = self._stack(_SWAPS[name])
        if not stack:
            return
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]
        self._emit(name)

    def push(self, name: str) -> None:
        """Move the top of one stack onto the other ("pa" or "pb")."""
        if name not in _PUSHES:
            raise ValueError(f"unknown push {name!r}")
        source_name, target_name = _PUSHES[name]
        source = self._stack(source_name)
        if not source:
            return
        self._stack(target_name).insert(0, source.pop(0))
        self._emit(name)

    def rotate(self, name: str, direction: Direction | str) -> None:
        """Rotate stack ``name`` ("a" or "b") up (ra/rb) or down (rra/rrb)."""
        stack = self._stack(name)
        direction = Direction(direction)
        if not stack:
            return
        if direction is Direction.UP:
            stack.append(stack.pop(0))
            self._emit("r" + name)
        else:
            stack.insert(0, stack.pop())
            self._emit("rr" + name)

    def is_sorted(self) -> bool:
        """True when stack ``a`` is in ascending order from the top."""
        return all(x <= y for x, y in zip(self.a, self.a[1:]))
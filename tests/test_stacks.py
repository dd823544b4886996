import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Direction, Stacks


def test_push_b_moves_top_of_a():
    s = Stacks([3, 1, 2])
    s.push("pb")
    assert s.a == [1, 2]
    assert s.b == [3]
    assert s.operations == ["pb"]


def test_push_a_moves_top_of_b_back():
    s = Stacks([3, 1, 2])
    s.push("pb")
    s.push("pb")
    s.push("pa")
    assert s.a == [1, 2]
    assert s.b == [3]
    assert s.operations == ["pb", "pb", "pa"]


def test_push_from_empty_stack_does_nothing():
    s = Stacks([1, 2])
    s.push("pa")
    assert s.a == [1, 2]
    assert s.b == []
    assert s.operations == []


def test_swap_exchanges_top_two():
    s = Stacks([2, 1, 3])
    s.swap("sa")
    assert s.a == [1, 2, 3]
    assert s.operations == ["sa"]


def test_swap_on_empty_stack_emits_nothing():
    s = Stacks([1])
    s.swap("sb")
    assert s.operations == []


def test_rotate_up_and_down():
    s = Stacks([1, 2, 3])
    s.rotate("a", Direction.UP)
    assert s.a == [2, 3, 1]
    s.rotate("a", Direction.DOWN)
    assert s.a == [1, 2, 3]
    assert s.operations == ["ra", "rra"]


def test_rotate_accepts_direction_text():
    s = Stacks([5, 6, 7])
    s.push("pb")
    s.push("pb")
    s.rotate("b", "down")
    assert s.b == [5, 6]
    assert s.operations[-1] == "rrb"


def test_operations_written_to_stream():
    out = io.StringIO()
    s = Stacks([2, 1, 3], out)
    s.swap("sa")
    s.push("pb")
    s.rotate("a", Direction.UP)
    assert out.getvalue() == "sa\npb\nra\n"


@pytest.mark.parametrize(
    "action",
    [
        lambda s: s.swap("ss"),
        lambda s: s.push("px"),
        lambda s: s.rotate("c", Direction.UP),
        lambda s: s.rotate("a", "sideways"),
    ],
)
def test_unknown_moves_raise(action):
    with pytest.raises(ValueError):
        action(Stacks([1, 2, 3]))


def test_is_sorted_looks_at_stack_a():
    assert Stacks([1, 2, 2, 5]).is_sorted() is True
    assert Stacks([2, 1]).is_sorted() is False
    assert Stacks([]).is_sorted() is True


@given(st.lists(st.integers(), min_size=1, max_size=30))
def test_rotate_up_then_down_restores(values):
    s = Stacks(values)
    s.rotate("a", Direction.UP)
    s.rotate("a", Direction.DOWN)
    assert s.a == values


@given(st.lists(st.integers(), min_size=1, max_size=30))
def test_push_round_trip_restores(values):
    s = Stacks(values)
    s.push("pb")
    s.push("pa")
    assert s.a == values
    assert s.b == []
import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stack import Stack, has_duplicates, is_cyclic_ascending

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=20)


def test_front_and_back():
    stk = Stack("a", [4, 5, 6])
    assert stk.front() == 4
    assert stk.back() == 6
    assert len(stk) == 3


def test_empty_front_raises():
    with pytest.raises(IndexError):
        Stack("a").front()
    with pytest.raises(IndexError):
        Stack("b").back()


def test_swap_exchanges_top_two():
    stk = Stack("a", [1, 2, 3])
    stk.swap()
    assert list(stk) == [2, 1, 3]


def test_rotate_moves_top_to_bottom():
    stk = Stack("a", [1, 2, 3])
    stk.rotate()
    assert list(stk) == [2, 3, 1]


def test_reverse_rotate_moves_bottom_to_top():
    stk = Stack("a", [1, 2, 3])
    stk.reverse_rotate()
    assert list(stk) == [3, 1, 2]


@pytest.mark.parametrize("values", [[], [7]])
def test_short_stack_operations_are_noops(values):
    stk = Stack("a", values)
    stk.swap()
    stk.rotate()
    stk.reverse_rotate()
    assert list(stk) == values


def test_push_onto_moves_top():
    a = Stack("a", [1, 2])
    b = Stack("b", [9])
    a.push_onto(b)
    assert list(a) == [2]
    assert list(b) == [1, 9]


def test_push_from_empty_is_noop():
    a = Stack("a")
    b = Stack("b", [3])
    a.push_onto(b)
    assert list(a) == []
    assert list(b) == [3]


@given(int_lists)
def test_rotate_then_reverse_is_identity(values):
    stk = Stack("a", values)
    stk.rotate()
    stk.reverse_rotate()
    assert list(stk) == values


@given(int_lists)
def test_swap_twice_is_identity(values):
    stk = Stack("a", values)
    stk.swap()
    stk.swap()
    assert list(stk) == values


@given(int_lists, int_lists)
def test_push_preserves_elements(first, second):
    a = Stack("a", first)
    b = Stack("b", second)
    a.push_onto(b)
    assert sorted(list(a) + list(b)) == sorted(first + second)


@given(int_lists)
def test_full_rotation_cycle_is_identity(values):
    stk = Stack("a", values)
    for _ in values:
        stk.rotate()
    assert list(stk) == values


def test_cyclic_ascending():
    assert is_cyclic_ascending([2, 3, 0, 1]) is True
    assert is_cyclic_ascending([0, 1, 2, 3]) is True
    assert is_cyclic_ascending([0, 2, 1]) is False
    assert is_cyclic_ascending([5]) is True


@given(st.lists(st.integers(), unique=True, max_size=15), st.integers(min_value=0, max_value=14))
def test_sorted_rotations_are_cyclic_ascending(values, shift):
    ordered = sorted(values)
    if ordered:
        shift %= len(ordered)
    rotated = ordered[shift:] + ordered[:shift]
    assert is_cyclic_ascending(rotated) is True


def test_has_duplicates():
    assert has_duplicates([1, 2, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert has_duplicates([]) is False
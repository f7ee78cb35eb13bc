"""Longest increasing subsequence over the rotations of a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .parse import INT_MAX, INT_MIN, normalize


def rotations_to_insert(values: Iterable[int], target: int) -> int:
    """Return how many forward rotations put ``target``'s slot at the top.

    The slot is the first position whose predecessor (cyclically) is smaller
    than ``target`` and whose own value is larger, with the wrap-around gap
    between maximum and minimum open to values beyond either end.
    """
    items = list(values)
    if len(items) < 2:
        return 0
    low = min(items)
    high = max(items)
    for index, back in enumerate(items):
        front = items[index - 1]
        if target < low and front == high:
            front = INT_MIN
        if target > high and back == low:
            back = INT_MAX
        if front < target < back:
            return index
    raise ValueError(f"no place to insert {target} into {items}")


def min_index(values: Iterable[int]) -> int:
    """Return the index of the first occurrence of the minimum."""
    items = list(values)
    if not items:
        raise ValueError("no minimum of an empty sequence")
    return items.index(min(items))


def _memo_from_offset(
    items: Sequence[int], ranks: Sequence[int], offset: int
) -> tuple[list[int], dict[int, int | None]]:
    """Compute LIS lengths reading ``items`` from ``offset`` onwards."""
    count = len(items)
    memo = [0] * count
    previous: dict[int, int | None] = dict.fromkeys(items)
    # Fenwick tree of (length, -order): the longest chain ending below a rank,
    # preferring the one reached earliest.
    tree: list[tuple[int, int]] = [(0, 0)] * (count + 1)
    for order in range(count):
        pos = (order + offset) % count
        rank = ranks[pos]
        best = (0, 0)
        node = rank
        while node > 0:
            best = max(best, tree[node])
            node -= node & -node
        length, neg_order = best
        if length:
            memo[pos] = length + 1
            previous[items[pos]] = items[(-neg_order + offset) % count]
        else:
            memo[pos] = 1
        entry = (memo[pos], -order)
        node = rank + 1
        while node <= count:
            if entry > tree[node]:
                tree[node] = entry
            node += node & -node
    return memo, previous


def lis_memo(values: Iterable[int]) -> tuple[list[int], dict[int, int | None]]:
    """Return LIS lengths by position and predecessors by value.

    Every rotation is tried and the first one giving the longest subsequence
    wins. The predecessor of a value is ``None`` where a chain starts.
    """
    items = list(values)
    ranks = normalize(items)
    best_memo = [0] * len(items)
    best_previous: dict[int, int | None] = dict.fromkeys(items)
    best_length = 0
    for offset in range(len(items)):
        memo, previous = _memo_from_offset(items, ranks, offset)
        length = max(memo)
        if length > best_length:
            best_length = length
            best_memo = memo
            best_previous = previous
    return best_memo, best_previous


def lis_members(values: Iterable[int]) -> frozenset[int]:
    """Return the values that make up the longest cyclic increasing run."""
    items = list(values)
    if not items:
        return frozenset()
    memo, previous = lis_memo(items)
    length = max(memo)
    end = max(index for index, value in enumerate(memo) if value == length)
    members: set[int] = set()
    current: int | None = items[end]
    while current is not None and current not in members:
        members.add(current)
        current = previous[current]
    return frozenset(members)


def should_rotate_forward(values: Iterable[int], members: frozenset[int]) -> bool:
    """Tell whether forward rotation reaches the non-members sooner."""
    items = list(values)
    begin = -1
    end = -1
    for index, value in enumerate(items):
        if value in members:
            continue
        if begin == -1:
            begin = index
        else:
            end = index
    if end == -1:
        end = begin
    return end < len(items) - begin + 1
"""Choosing the cheapest rotations before pushing from b back to a."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .lis import min_index, rotations_to_insert
from .stack import has_duplicates, is_cyclic_ascending


@dataclass(frozen=True)
class RotationPlan:
    """Counts of each rotation to perform before a push."""

    ra: int = 0
    rra: int = 0
    rb: int = 0
    rrb: int = 0
    rr: int = 0
    rrr: int = 0

    def total(self) -> int:
        """Return the number of instructions the plan costs."""
        return self.ra + self.rra + self.rb + self.rrb + self.rr + self.rrr


def _best_plan(ra: int, len_a: int, index: int, len_b: int) -> RotationPlan:
    rra = len_a - ra
    rb = index
    rrb = len_b - index
    rr = min(ra, rb)
    rrr = min(rra, rrb)
    candidates = (
        RotationPlan(ra=ra - rr, rb=rb - rr, rr=rr),
        RotationPlan(rra=rra, rb=rb),
        RotationPlan(ra=ra, rrb=rrb),
        RotationPlan(rra=rra - rrr, rrb=rrb - rrr, rrr=rrr),
    )
    return min(candidates, key=RotationPlan.total)


def plan_for(
    a_values: Iterable[int], b_values: Iterable[int], index: int
) -> RotationPlan:
    """Return the cheapest plan to move ``b_values[index]`` into place in a."""
    a = list(a_values)
    b = list(b_values)
    if not 0 <= index < len(b):
        raise IndexError(f"index {index} out of range for stack b")
    ra = rotations_to_insert(a, b[index])
    return _best_plan(ra, len(a), index, len(b))


def _insertion_finder(a: Sequence[int]) -> Callable[[int], int]:
    """Return a lookup equal to ``rotations_to_insert`` on ``a``."""
    if len(a) < 2 or has_duplicates(a) or not is_cyclic_ascending(a):
        return lambda target: rotations_to_insert(a, target)
    count = len(a)
    start = min_index(a)
    ordered = list(a[start:]) + list(a[:start])

    def find(target: int) -> int:
        pos = bisect_left(ordered, target)
        if pos < count and ordered[pos] == target:
            return rotations_to_insert(a, target)
        if pos in (0, count):
            return start
        return (start + pos) % count

    return find


def cheapest_plan(a_values: Iterable[int], b_values: Iterable[int]) -> RotationPlan:
    """Return the cheapest plan over all elements of b, earliest on ties."""
    a = list(a_values)
    b = list(b_values)
    if not b:
        raise ValueError("stack b is empty")
    find = _insertion_finder(a)
    best: RotationPlan | None = None
    for index, target in enumerate(b):
        plan = _best_plan(find(target), len(a), index, len(b))
        if best is None or plan.total() < best.total():
            best = plan
    return best
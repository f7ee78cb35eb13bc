"""Producing a push_swap instruction list that sorts a stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .lis import lis_members, should_rotate_forward
from .parse import ParseError, normalize, parse_arguments
from .planner import cheapest_plan
from .stack import Stack, has_duplicates, is_cyclic_ascending


class _Machine:
    """Two stacks plus the record of instructions applied to them."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a = Stack("a", values)
        self.b = Stack("b")
        self.moves: list[str] = []

    def swap(self, stack: Stack) -> None:
        stack.swap()
        self.moves.append(f"s{stack.name}")

    def push(self, src: Stack, dst: Stack) -> None:
        src.push_onto(dst)
        self.moves.append(f"p{dst.name}")

    def rotate(self, stack: Stack, times: int = 1) -> None:
        for _ in range(times):
            stack.rotate()
            self.moves.append(f"r{stack.name}")

    def reverse_rotate(self, stack: Stack, times: int = 1) -> None:
        for _ in range(times):
            stack.reverse_rotate()
            self.moves.append(f"rr{stack.name}")

    def rotate_both(self, times: int) -> None:
        for _ in range(times):
            self.a.rotate()
            self.b.rotate()
            self.moves.append("rr")

    def reverse_rotate_both(self, times: int) -> None:
        for _ in range(times):
            self.a.reverse_rotate()
            self.b.reverse_rotate()
            self.moves.append("rrr")


def _three_sort(machine: _Machine, stack: Stack) -> None:
    x, y, z = list(stack)
    if x < z and y > z:
        machine.swap(stack)
        machine.rotate(stack)
    if x > y and x < z and y < z:
        machine.swap(stack)
    if x < y and x > z and y > z:
        machine.reverse_rotate(stack)
    if x > z and y < z:
        machine.rotate(stack)
    if x > y and y > z:
        machine.rotate(stack)
        machine.swap(stack)


def _last_sort(machine: _Machine, stack: Stack) -> None:
    items = list(stack)
    forward = items.index(0)
    backward = len(items) - forward
    if backward < forward:
        machine.reverse_rotate(stack, backward)
    else:
        machine.rotate(stack, forward)


def _five_sort(machine: _Machine) -> None:
    a, b = machine.a, machine.b
    keep_from = len(a) - 3
    if is_cyclic_ascending(a):
        _last_sort(machine, a)
        return
    while len(a) > 3:
        if a.front() < keep_from:
            machine.push(a, b)
        else:
            machine.rotate(a)
    _three_sort(machine, a)
    if len(b) > 1 and b.front() < b.back():
        machine.swap(b)
    while len(b):
        machine.push(b, a)


def _push_outsiders(machine: _Machine, members: frozenset[int]) -> None:
    a, b = machine.a, machine.b
    if len(members) == len(a):
        return
    mid = len(a) // 2
    forward = should_rotate_forward(list(a), members)
    while not is_cyclic_ascending(a):
        if a.front() not in members:
            machine.push(a, b)
            if b.front() >= mid:
                machine.rotate(b)
        elif forward:
            machine.rotate(a)
        else:
            machine.reverse_rotate(a)


def _large_sort(machine: _Machine) -> None:
    a, b = machine.a, machine.b
    _push_outsiders(machine, lis_members(list(a)))
    while len(b):
        plan = cheapest_plan(list(a), list(b))
        machine.rotate(a, plan.ra)
        machine.reverse_rotate(a, plan.rra)
        machine.rotate(b, plan.rb)
        machine.reverse_rotate(b, plan.rrb)
        machine.rotate_both(plan.rr)
        machine.reverse_rotate_both(plan.rrr)
        machine.push(b, a)
    _last_sort(machine, a)


def solve(values: Iterable[int]) -> list[str]:
    """Return the instructions that sort ``values`` ascending on stack a."""
    items = list(values)
    if has_duplicates(items):
        raise ParseError("duplicate values")
    if not items:
        return []
    machine = _Machine(normalize(items))
    if len(items) < 6:
        _five_sort(machine)
    else:
        _large_sort(machine)
    return machine.moves


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sorting instructions for the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        moves = solve(parse_arguments(args))
    except ParseError:
        print("Error", file=sys.stderr)
        return 1
    for move in moves:
        print(move)
    return 0


if __name__ == "__main__":
    sys.exit(main())
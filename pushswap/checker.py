"""Checking that a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum

from .parse import ParseError, normalize, parse_arguments
from .stack import Stack, has_duplicates, is_cyclic_ascending


class Instruction(Enum):
    """The eleven push_swap instructions, valued by their spelling."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


class InstructionError(ValueError):
    """Raised when a line is not a known instruction."""


def _to_instruction(value: Instruction | str) -> Instruction:
    if isinstance(value, Instruction):
        return value
    try:
        return Instruction(value)
    except ValueError:
        raise InstructionError(f"unknown instruction: {value!r}") from None


def apply(a: Stack, b: Stack, instruction: Instruction | str) -> None:
    """Carry out one instruction on stacks ``a`` and ``b``."""
    instruction = _to_instruction(instruction)
    if instruction is Instruction.SA:
        a.swap()
    elif instruction is Instruction.SB:
        b.swap()
    elif instruction is Instruction.SS:
        a.swap()
        b.swap()
    elif instruction is Instruction.PA:
        b.push_onto(a)
    elif instruction is Instruction.PB:
        a.push_onto(b)
    elif instruction is Instruction.RA:
        a.rotate()
    elif instruction is Instruction.RB:
        b.rotate()
    elif instruction is Instruction.RR:
        a.rotate()
        b.rotate()
    elif instruction is Instruction.RRA:
        a.reverse_rotate()
    elif instruction is Instruction.RRB:
        b.reverse_rotate()
    else:
        a.reverse_rotate()
        b.reverse_rotate()


def read_instructions(stream: Iterable[str]) -> Iterator[Instruction]:
    """Yield instructions line by line; an empty line ends the input."""
    for line in stream:
        text = line[:-1] if line.endswith("\n") else line
        if not text:
            return
        yield _to_instruction(text)


def check(values: Iterable[int], instructions: Iterable[Instruction | str]) -> bool:
    """Apply ``instructions`` to ``values`` and tell whether a ends sorted.

    Stack a counts as sorted when it ascends cyclically and its top is the
    smallest of all the original values.
    """
    items = list(values)
    if has_duplicates(items):
        raise ParseError("duplicate values")
    a = Stack("a", normalize(items))
    b = Stack("b")
    for instruction in instructions:
        apply(a, b, instruction)
    return len(a) > 0 and is_cyclic_ascending(a) and a.front() == 0


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        sorted_ok = check(values, read_instructions(sys.stdin))
    except (ParseError, InstructionError):
        print("Error", file=sys.stderr)
        return 1
    print("OK" if sorted_ok else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())
# pushswap

pushswap sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of instructions, and prints the instructions it used. A checker reads
an instruction sequence and reports whether it sorts the input.

## Instructions

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down (bottom goes to the top)      |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

An instruction that needs more elements than the stack holds does nothing.

## Installation

```
pip install .
```

## Command line

Sort some numbers and print the instructions, one per line:

```
push-swap 3 2 1 5 4
```

Numbers can be given as separate arguments or together in one quoted argument
separated by spaces. Each number may have leading whitespace and a `+` or `-`
sign. If an argument holds no numbers, holds something other than an integer in
the 32-bit signed range, or the numbers contain duplicates, `Error` is written to
standard error and the exit status is 1. With no arguments nothing is printed.

Up to five numbers are sorted with a short fixed strategy. Larger inputs keep a
longest cyclically increasing run on `a`, move the rest to `b`, and bring each
element back with the cheapest combination of rotations.

Check an instruction sequence read from standard input:

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

The checker reads one instruction per line until end of input or an empty line.
It prints `OK` if stack `a` is not empty, ascends when read cyclically, and has
the smallest of the input numbers on top; otherwise it prints `KO`. Stack `b` is
not required to be empty. An unknown instruction, or input numbers that the
solver would reject, print `Error` to standard error with exit status 1.

## Library use

```python
from pushswap.solver import solve
from pushswap.checker import check

instructions = solve([3, 2, 1, 5, 4])
assert check([3, 2, 1, 5, 4], instructions)
```

- `pushswap.solver.solve(values)` returns the instruction list as strings; it
  raises `ParseError` on duplicate values.
- `pushswap.checker` has `check(values, instructions)`, which accepts
  `Instruction` members or their spellings; `apply(a, b, instruction)`, which
  carries out one instruction on two `Stack` objects; `read_instructions(stream)`,
  which yields `Instruction` members from lines of text; and `InstructionError`,
  raised for an unknown instruction.
- `pushswap.parse` provides `parse_int`, `parse_arguments`, which turns
  command-line strings into integers and raises `ParseError` on bad input, and
  `normalize`, which replaces each value by its rank.
- `pushswap.stack.Stack` models a single named stack with `front`, `back`,
  `swap`, `push_onto`, `rotate` and `reverse_rotate`; the module also has
  `is_cyclic_ascending` and `has_duplicates`.
- `pushswap.lis` finds the longest cyclically increasing run (`lis_members`),
  and `pushswap.planner` chooses the cheapest `RotationPlan` for moving an
  element from `b` back to `a` (`plan_for`, `cheapest_plan`).

## Running the tests

```
pip install ".[test]"
pytest
```
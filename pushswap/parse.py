"""Parsing of command-line numbers into stack values."""

from __future__ import annotations

import re
from bisect import bisect_left
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]+)")


class ParseError(ValueError):
    """Raised when the input cannot be turned into stack values."""


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer, allowing leading whitespace."""
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise ParseError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"integer out of range: {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Split each argument on spaces and parse every piece as an integer."""
    values: list[int] = []
    for arg in args:
        pieces = [piece for piece in arg.split(" ") if piece]
        if not pieces:
            raise ParseError(f"no numbers in argument: {arg!r}")
        values.extend(parse_int(piece) for piece in pieces)
    return values


def normalize(values: Iterable[int]) -> list[int]:
    """Replace each value by its rank among all values, starting at 0."""
    items = list(values)
    ordered = sorted(items)
    return [bisect_left(ordered, value) for value in items]
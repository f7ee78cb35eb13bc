"""Double-ended stack of integers with the push_swap operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class Stack:
    """A named stack whose top is the front of the sequence."""

    def __init__(self, name: str, values: Iterable[int] = ()) -> None:
        self.name = name
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {list(self._items)!r})"

    def front(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError(f"stack {self.name} is empty")
        return self._items[0]

    def back(self) -> int:
        """Return the bottom element."""
        if not self._items:
            raise IndexError(f"stack {self.name} is empty")
        return self._items[-1]

    def swap(self) -> None:
        """Exchange the two top elements; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def push_onto(self, other: Stack) -> None:
        """Move the top element onto ``other``; does nothing when empty."""
        if not self._items:
            return
        other._items.appendleft(self._items.popleft())

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._items) < 2:
            return
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if len(self._items) < 2:
            return
        self._items.rotate(1)


def is_cyclic_ascending(values: Iterable[int]) -> bool:
    """Tell whether the values ascend when read cyclically from the minimum."""
    items = list(values)
    if len(items) < 2:
        return True
    start = items.index(min(items))
    ordered = items[start:] + items[:start]
    return all(prev <= nxt for prev, nxt in zip(ordered, ordered[1:]))


def has_duplicates(values: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    items = list(values)
    return len(set(items)) != len(items)
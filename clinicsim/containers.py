"""Queue, priority queue and bounded stack used by the simulation."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

RENDER_LIMIT = 10
STACK_CAPACITY = 100


def _join(items: Iterable[object], newline: bool) -> str:
    separator = "\n" if newline else ", "
    return separator.join(str(item) for item in items)


class LinkedQueue(Generic[T]):
    """First-in first-out queue."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def enqueue(self, item: T) -> None:
        """Add an item at the back."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the front item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def render(self, newline: bool = False) -> str:
        """Text of at most the first ten items, front first."""
        return _join(islice(self._items, RENDER_LIMIT), newline)


@dataclass(frozen=True)
class _PriEntry(Generic[T]):
    item: T
    priority: int


class PriQueue(Generic[T]):
    """Priority queue; the highest priority is at the front, ties keep arrival order."""

    def __init__(self) -> None:
        self._entries: list[_PriEntry[T]] = []

    def enqueue(self, item: T, priority: int) -> None:
        """Insert an item behind every entry of equal or higher priority."""
        position = bisect_right(self._entries, -priority, key=lambda entry: -entry.priority)
        self._entries.insert(position, _PriEntry(item, priority))

    def dequeue(self) -> tuple[T, int]:
        """Remove the front entry and return (item, priority); raise IndexError when empty."""
        if not self._entries:
            raise IndexError("dequeue from an empty priority queue")
        entry = self._entries.pop(0)
        return entry.item, entry.priority

    def peek(self) -> tuple[T, int]:
        """Return (item, priority) of the front entry; raise IndexError when empty."""
        if not self._entries:
            raise IndexError("peek at an empty priority queue")
        entry = self._entries[0]
        return entry.item, entry.priority

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return (entry.item for entry in self._entries)

    def render(self, newline: bool = False) -> str:
        """Text of at most the first ten items, front first."""
        return _join(islice(iter(self), RENDER_LIMIT), newline)


class StackFullError(Exception):
    """Raised when pushing onto a stack that is at capacity."""


class ArrayStack(Generic[T]):
    """Last-in first-out stack with a fixed capacity."""

    def __init__(self, capacity: int = STACK_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Push an item; raise StackFullError at capacity."""
        if len(self._items) >= self.capacity:
            raise StackFullError(f"stack is full ({self.capacity} items)")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def render(self, newline: bool = False) -> str:
        """Text of every item, top first; entries are always listed one per line."""
        return _join(self, True)
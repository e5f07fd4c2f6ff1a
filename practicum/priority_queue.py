"""A priority queue kept as a sorted list; the largest value is on top."""

from __future__ import annotations

from bisect import insort_right
from typing import Any


class EmptyQueueError(Exception):
    """Raised when an element is requested from an empty queue."""


class PriorityQueue:
    """A max-priority queue: ``top``, ``pop`` and ``get`` work on the largest value."""

    def __init__(self, *args: Any) -> None:
        """Create an empty queue, or one holding a single initial value."""
        if len(args) > 1:
            raise TypeError(
                f"PriorityQueue takes at most one initial value ({len(args)} given)"
            )
        self._data: list[Any] = []
        for value in args:
            self.put(value)

    def put(self, value: Any) -> None:
        """Insert a value; equal values keep their insertion order."""
        insort_right(self._data, value)

    def pop(self) -> None:
        """Remove the largest value."""
        if not self._data:
            raise EmptyQueueError("Cant pop() because queue is empty")
        self._data.pop()

    def top(self) -> Any:
        """Return the largest value without removing it."""
        if not self._data:
            raise EmptyQueueError("Cant top() because queue is empty")
        return self._data[-1]

    def get(self) -> Any:
        """Remove the largest value and return it."""
        if not self._data:
            raise EmptyQueueError("Cant get() because queue is empty")
        return self._data.pop()

    def empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._data

    def clear(self) -> None:
        """Remove all values."""
        self._data.clear()

    def copy(self) -> PriorityQueue:
        """Return an independent copy of the queue."""
        duplicate = PriorityQueue()
        duplicate._data = list(self._data)
        return duplicate

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PriorityQueue({self._data!r})"
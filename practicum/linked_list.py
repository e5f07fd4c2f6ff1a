"""A double-ended list of values with checked access to both ends."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class EmptyListError(IndexError):
    """Raised when an element is requested from an empty list."""


class LinkedList:
    """An ordered sequence supporting access and removal at its end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise EmptyListError("Cant front() because list is empty")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise EmptyListError("Cant back() because list is empty")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True if the list holds no elements."""
        return not self._items

    def push_back(self, value: Any) -> None:
        """Append a value at the end."""
        self._items.append(value)

    def pop_back(self) -> None:
        """Remove the last element."""
        if not self._items:
            raise EmptyListError("Cant pop_back() because list is empty")
        self._items.pop()

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    def swap(self, other: LinkedList) -> None:
        """Exchange contents with another list without copying elements."""
        self._items, other._items = other._items, self._items

    def copy(self) -> LinkedList:
        """Return an independent list holding the same elements."""
        return LinkedList(self._items)

    def take(self) -> LinkedList:
        """Move all elements into a new list, leaving this one empty."""
        moved = LinkedList()
        moved._items, self._items = self._items, deque()
        return moved

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self._items) == len(other._items) and all(
            mine == theirs for mine, theirs in zip(self._items, other._items)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"
"""A last-in, first-out stack built on LinkedList."""

from __future__ import annotations

from typing import Any

from practicum.linked_list import LinkedList


class Stack:
    """A stack: values are pushed and popped at the top."""

    def __init__(self) -> None:
        self._data = LinkedList()

    def top(self) -> Any:
        """Return the most recently pushed value."""
        return self._data.back()

    def empty(self) -> bool:
        """Return True if the stack holds no values."""
        return self._data.empty()

    def push(self, value: Any) -> None:
        """Put a value on top."""
        self._data.push_back(value)

    def pop(self) -> None:
        """Remove the top value."""
        self._data.pop_back()

    def clear(self) -> None:
        """Remove all values."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Stack({list(self._data)!r})"
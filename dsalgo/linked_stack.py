"""Last-in first-out stack on a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class LinkedStack:
    """A LIFO stack; the most recently pushed value is popped first."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return self._top is None

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        node = _Node(value, prev=self._top)
        if self._top is not None:
            self._top.next = node
        self._top = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError if the stack is empty."""
        node = self._top
        if node is None:
            raise IndexError("Stack is empty")
        self._top = node.prev
        if self._top is not None:
            self._top.next = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from the top of the stack down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"
"""First-in first-out queue on a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class LinkedQueue:
    """A FIFO queue; values leave in the order they arrived."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        """Tell whether the queue holds no values."""
        return self._front is None

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value, prev=self._rear)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError if the queue is empty."""
        node = self._front
        if node is None:
            raise IndexError("Queue is empty")
        self._front = node.next
        if self._front is None:
            self._rear = None
        else:
            self._front.prev = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size
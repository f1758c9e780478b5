"""Double-ended queue in a fixed-size circular buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class RingDeque:
    """A deque of at most ``capacity`` values stored in a ring buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def is_empty(self) -> bool:
        """Tell whether the deque holds no values."""
        return self._front == -1

    def is_full(self) -> bool:
        """Tell whether every slot is taken."""
        if self.is_empty():
            return False
        return (self._front == 0 and self._rear == self.capacity - 1) or (
            self._front == self._rear + 1
        )

    def push_front(self, value: Any) -> None:
        """Add ``value`` before the first value; raise IndexError if full."""
        if self.is_full():
            raise IndexError("Queue is Full")
        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._front = (self._front - 1) % self.capacity
        self._slots[self._front] = value

    def push_back(self, value: Any) -> None:
        """Add ``value`` after the last value; raise IndexError if full."""
        if self.is_full():
            raise IndexError("Queue is Full")
        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = value

    def pop_front(self) -> Any:
        """Remove and return the first value; raise IndexError if empty."""
        if self.is_empty():
            raise IndexError("Queue is Empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self.capacity
        return value

    def pop_back(self) -> Any:
        """Remove and return the last value; raise IndexError if empty."""
        if self.is_empty():
            raise IndexError("Queue is Empty")
        value = self._slots[self._rear]
        self._slots[self._rear] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._rear = (self._rear - 1) % self.capacity
        return value

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        if self.is_empty():
            return
        index = self._front
        while index != self._rear:
            yield self._slots[index]
            index = (index + 1) % self.capacity
        yield self._slots[self._rear]

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1

    def __repr__(self) -> str:
        return f"RingDeque({list(self)!r}, capacity={self.capacity})"
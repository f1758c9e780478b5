"""Open-addressing hash tables with linear, double-hash and quadratic probing."""

from __future__ import annotations

import enum

TABLE_SIZE = 10


class Probing(enum.Enum):
    """Collision resolution strategy."""

    LINEAR = "linear"
    DOUBLE = "double"
    QUADRATIC = "quadratic"


class TableFullError(Exception):
    """Raised when probing finds no free slot for a key."""


def primary_hash(key: int, size: int = TABLE_SIZE) -> int:
    """Return the home slot of ``key``."""
    return key % size


def step_hash(key: int, size: int = TABLE_SIZE) -> int:
    """Return the probe step used by double hashing."""
    return 1 + key % (size - 1)


class OpenAddressingTable:
    """A fixed-size table of ``(key, value)`` slots; keys must not be negative."""

    def __init__(self, probing: Probing = Probing.LINEAR, size: int = TABLE_SIZE) -> None:
        if size < 1 or (probing is Probing.DOUBLE and size < 2):
            raise ValueError("table size is too small")
        self.probing = probing
        self.size = size
        self.slots: list[tuple[int, int] | None] = [None] * size

    def _probe(self, key: int):
        index = primary_hash(key, self.size)
        step = step_hash(key, self.size) if self.probing is Probing.DOUBLE else 1
        # Every probe sequence repeats within 2 * size steps.
        for attempt in range(1, 2 * self.size + 1):
            yield index
            if self.probing is Probing.QUADRATIC:
                index = (index + attempt) % self.size
            else:
                index = (index + step) % self.size

    def insert(self, key: int, value: int) -> int:
        """Store ``key`` and ``value`` in the first free probed slot and return its index."""
        if key < 0:
            raise ValueError("keys must not be negative")
        for index in self._probe(key):
            if self.slots[index] is None:
                self.slots[index] = (key, value)
                return index
        raise TableFullError(f"no free slot for key {key}")

    def render(self) -> str:
        """List every slot; an empty slot shows -1 for key and value."""
        lines = ["Hash Table:"]
        for index, slot in enumerate(self.slots):
            key, value = slot if slot is not None else (-1, -1)
            lines.append(f"Slot {index}: Key = {key}, Value = {value}")
        return "\n".join(lines) + "\n\n"
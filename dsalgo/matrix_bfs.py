"""Breadth-first search over an adjacency matrix with labelled vertices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class LabelledGraph:
    """An undirected graph stored as a 0/1 matrix; each vertex carries a label."""

    def __init__(self, labels: Iterable[str]) -> None:
        self.labels = list(labels)
        size = len(self.labels)
        self.matrix: list[list[int]] = [[0] * size for _ in range(size)]

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.labels):
            raise ValueError(f"vertex index {index} is out of range")

    def _index(self, label: str) -> int:
        try:
            return self.labels.index(label)
        except ValueError:
            raise ValueError(f"unknown vertex label {label!r}") from None

    def add_edge(self, a: int, b: int) -> None:
        """Connect the vertices at indices ``a`` and ``b``; repeats have no effect."""
        self._check(a)
        self._check(b)
        self.matrix[a][b] = self.matrix[b][a] = 1

    def bfs(self, start_label: str) -> list[str]:
        """Return labels in breadth-first order from the vertex labelled ``start_label``."""
        start = self._index(start_label)
        visited = {start}
        order: list[str] = []
        queue = deque([start_label])
        while queue:
            label = queue.popleft()
            order.append(label)
            row = self.matrix[self._index(label)]
            for i, connected in enumerate(row):
                if connected and i not in visited:
                    visited.add(i)
                    queue.append(self.labels[i])
        return order

    def format_matrix(self) -> str:
        """Render the matrix with every entry followed by a tab, one row per line."""
        return "".join(
            "".join(f"{entry}\t" for entry in row) + "\n" for row in self.matrix
        )
"""Single-source shortest distances on a weighted directed graph."""

from __future__ import annotations

import math


class WeightedDigraph:
    """A directed graph on vertices ``0 .. vertices - 1`` with integer edge weights."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = vertices
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Add an edge from ``src`` to ``dest``."""
        self._check(src)
        self._check(dest)
        self._adj[src].append((dest, weight))

    def shortest_distances(self, source: int) -> list[int | None]:
        """Return the distance of every vertex from ``source``; None where unreachable."""
        self._check(source)
        dist: list[float] = [math.inf] * self.vertices
        dist[source] = 0
        pending = set(range(self.vertices))
        for _ in range(self.vertices - 1):
            # Among equal distances the highest-numbered vertex is taken.
            u = min(sorted(pending, reverse=True), key=dist.__getitem__)
            pending.discard(u)
            if dist[u] == math.inf:
                continue
            for dest, weight in self._adj[u]:
                if dest in pending and dist[u] + weight < dist[dest]:
                    dist[dest] = dist[u] + weight
        return [None if d == math.inf else int(d) for d in dist]


def format_distances(distances: list[int | None]) -> str:
    """Render a distance table, one vertex per line."""
    lines = ["Vertex   Distance from Source"]
    lines.extend(
        f"{vertex} \t\t {'unreachable' if d is None else d}"
        for vertex, d in enumerate(distances)
    )
    return "\n".join(lines) + "\n"
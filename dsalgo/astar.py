"""A* shortest-path search over a weighted adjacency mapping."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping

SAMPLE_GRAPH: dict[str, list[tuple[str, int]]] = {
    "A": [("B", 1), ("C", 4)],
    "B": [("A", 1), ("D", 2), ("C", 2)],
    "C": [("A", 4), ("B", 2), ("D", 3)],
    "D": [("B", 2), ("C", 3), ("E", 1)],
    "E": [("D", 1), ("F", 5)],
    "F": [("E", 5), ("G", 1)],
    "G": [("F", 1)],
}

SAMPLE_HEURISTIC: dict[str, float] = {
    "A": 7, "B": 6, "C": 2, "D": 1, "E": 3, "F": 2, "G": 0,
}


class PathNotFoundError(LookupError):
    """Raised when no path leads from the start to the goal."""


def a_star(
    graph: Mapping[Hashable, Iterable[tuple[Hashable, float]]],
    heuristic: Mapping[Hashable, float],
    start: Hashable,
    goal: Hashable,
) -> list[Hashable]:
    """Return the path from ``start`` to ``goal`` found by A*.

    ``graph`` maps each node to ``(neighbour, weight)`` pairs. Nodes missing
    from ``heuristic`` are estimated at 0. Closed nodes are never reopened.
    """
    g: dict[Hashable, float] = {start: 0}
    parents: dict[Hashable, Hashable] = {start: start}
    open_nodes: dict[Hashable, None] = {start: None}
    closed: set[Hashable] = set()

    def score(node: Hashable) -> float:
        return g[node] + heuristic.get(node, 0)

    while open_nodes:
        current = min(open_nodes, key=score)
        if current == goal:
            path = [current]
            while parents[current] != current:
                current = parents[current]
                path.append(current)
            path.reverse()
            return path

        del open_nodes[current]
        closed.add(current)

        for neighbour, weight in graph.get(current, ()):
            if neighbour in closed:
                continue
            tentative = g[current] + weight
            if neighbour not in open_nodes or tentative < g[neighbour]:
                open_nodes[neighbour] = None
                g[neighbour] = tentative
                parents[neighbour] = current

    raise PathNotFoundError(f"no path from {start!r} to {goal!r}")
"""Kruskal's minimum spanning tree from matrix or adjacency-list input."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from operator import attrgetter
from typing import NamedTuple

INF = 10000
"""Matrix entry that marks the absence of an edge."""


class Edge(NamedTuple):
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: int


def matrix_edges(matrix: Sequence[Sequence[int | None]]) -> list[Edge]:
    """Collect the edges above the diagonal; ``INF`` or None means no edge."""
    return [
        Edge(i, j, weight)
        for i, row in enumerate(matrix)
        for j, weight in enumerate(row)
        if j > i and weight is not None and weight != INF
    ]


def adjacency_edges(adjacency: Sequence[Iterable[tuple[int, int]]]) -> list[Edge]:
    """Collect an edge for every ``(dest, weight)`` entry of every vertex's list."""
    return [
        Edge(src, dest, weight)
        for src, neighbours in enumerate(adjacency)
        for dest, weight in neighbours
    ]


def kruskal(edges: Iterable[Edge], vertices: int) -> list[Edge]:
    """Return the spanning-forest edges chosen in ascending weight order."""
    parent = [-1] * vertices

    def find(i: int) -> int:
        while parent[i] != -1:
            i = parent[i]
        return i

    result: list[Edge] = []
    for edge in sorted(edges, key=attrgetter("weight")):
        if len(result) >= vertices - 1:
            break
        for vertex in (edge.src, edge.dest):
            if not 0 <= vertex < vertices:
                raise ValueError(f"vertex {vertex} is out of range")
        src_root = find(edge.src)
        dest_root = find(edge.dest)
        if src_root != dest_root:
            result.append(edge)
            parent[dest_root] = src_root
    return result
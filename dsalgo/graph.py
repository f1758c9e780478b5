"""Undirected adjacency-list graph with breadth-, depth- and iterative-deepening search."""

from __future__ import annotations

from collections import deque


class Graph:
    """An undirected graph on vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = vertices
        self.adj: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self.adj[u].append(v)
        self.adj[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self.adj[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return vertices in depth-first order from ``start``."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [iter(self.adj[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self.adj[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def depth_limited_search(self, node: int, goal: int, limit: int) -> bool:
        """Tell whether ``goal`` lies within ``limit`` edges of ``node`` on a simple path."""
        self._check(node)
        self._check(goal)
        return self._dls(node, goal, limit, set())

    def _dls(self, node: int, goal: int, limit: int, visited: set[int]) -> bool:
        if node == goal:
            return True
        if limit <= 0:
            return False
        visited.add(node)
        for neighbour in self.adj[node]:
            if neighbour not in visited and self._dls(neighbour, goal, limit - 1, visited):
                return True
        visited.discard(node)
        return False

    def iddfs(self, start: int, goal: int, max_depth: int) -> int | None:
        """Return the smallest depth at which ``goal`` is found, or None."""
        self._check(start)
        self._check(goal)
        for depth in range(max_depth + 1):
            if self._dls(start, goal, depth, set()):
                return depth
        return None
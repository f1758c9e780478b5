"""AO* style search over a cost matrix guided by a heuristic."""

from __future__ import annotations

from collections.abc import Collection, Sequence

INF = 9999
"""Cost value that marks the absence of an edge."""


def _has_edge(weight: int | None) -> bool:
    return weight is not None and weight != INF


def ao_star(
    cost: Sequence[Sequence[int | None]],
    heuristic: Sequence[int],
    goals: Collection[int],
    start: int,
) -> tuple[bool, list[tuple[int, int]]]:
    """Search from ``start`` towards any node in ``goals``.

    ``cost[i][j]`` is the cost of the edge from ``i`` to ``j``; ``INF`` or
    ``None`` means there is no edge. At each node the search follows the
    successors whose heuristic is lowest. A node already on the current
    search path is not entered again, so cycles cannot recurse forever.

    Returns whether ``start`` was solved and the list of expansions made,
    each as ``(node, lowest successor heuristic)``.
    """
    size = len(cost)
    if any(len(row) != size for row in cost):
        raise ValueError("cost matrix must be square")
    if len(heuristic) != size:
        raise ValueError("heuristic must have one value per node")
    if not 0 <= start < size:
        raise ValueError(f"start node {start} is out of range")

    goal_set = frozenset(goals)
    solved: set[int] = set()
    expansions: list[tuple[int, int]] = []
    on_path: set[int] = set()

    def expand(node: int) -> None:
        if node in goal_set:
            solved.add(node)
            return
        on_path.add(node)
        successors = [i for i, weight in enumerate(cost[node]) if _has_edge(weight)]
        best = min([INF, *(heuristic[i] for i in successors)])
        expansions.append((node, best))
        for successor in successors:
            if heuristic[successor] == best and successor not in on_path:
                expand(successor)
                if successor in solved:
                    solved.add(node)
                    break
        on_path.discard(node)

    expand(start)
    return start in solved, expansions
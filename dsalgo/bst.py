"""Binary search tree with deletion, mirroring and level-order traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


def _delete(node: _Node | None, value: int) -> _Node | None:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return node


class BinarySearchTree:
    """An unbalanced search tree of distinct values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value``; a value already present is ignored."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right
            else:
                return

    def delete(self, value: int) -> None:
        """Remove ``value`` if present, replacing a two-child node by its in-order successor."""
        self._root = _delete(self._root, value)

    def mirror(self) -> None:
        """Swap the children of every node."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is not None:
                node.left, node.right = node.right, node.left
                stack.extend((node.left, node.right))

    def level_order(self) -> list[int]:
        """Return the values level by level, left to right."""
        result: list[int] = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        return result

    def height(self) -> int:
        """Return the number of levels; 0 for an empty tree."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [c for node in level for c in (node.left, node.right) if c is not None]
        return levels

    def _preorder_nodes(self) -> Iterable[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def leaves(self) -> list[int]:
        """Return the values of childless nodes, left to right."""
        return [
            node.value
            for node in self._preorder_nodes()
            if node.left is None and node.right is None
        ]

    def inorder(self) -> list[int]:
        """Return the values in in-order (ascending unless mirrored)."""
        result: list[int] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def __contains__(self, value: object) -> bool:
        return any(node.value == value for node in self._preorder_nodes())
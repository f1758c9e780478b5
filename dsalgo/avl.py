"""Self-balancing AVL binary search tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: _Node | None, value: int) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node

    _update(node)
    balance = _height(node.left) - _height(node.right)
    if balance > 1 and node.left is not None:
        if value < node.left.value:
            return _rotate_right(node)
        if value > node.left.value:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
    if balance < -1 and node.right is not None:
        if value > node.right.value:
            return _rotate_left(node)
        if value < node.right.value:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
    return node


class AVLTree:
    """A set of distinct values kept in a height-balanced search tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: int) -> None:
        """Add ``value``; a value already present is ignored."""
        self._root = _insert(self._root, value)

    def inorder(self) -> list[int]:
        """Return the values in ascending order."""
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

    def preorder(self) -> list[int]:
        """Return the values root first, then left subtree, then right subtree."""
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def height(self) -> int:
        """Return the number of levels; 0 for an empty tree."""
        return _height(self._root)

    def render(self) -> str:
        """Draw the tree sideways: right subtree above, eight spaces of indent per level."""
        parts: list[str] = []

        def walk(node: _Node | None, level: int) -> None:
            if node is None:
                return
            walk(node.right, level + 1)
            parts.append("\n" + "        " * level + str(node.value))
            walk(node.left, level + 1)

        walk(self._root, 0)
        return "".join(parts)
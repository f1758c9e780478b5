"""In-order threaded binary search tree with a header node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class DuplicateKeyError(ValueError):
    """Raised when a key already in the tree is inserted again."""


@dataclass(eq=False)
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None
    has_left: bool = False
    has_right: bool = False


class ThreadedBinaryTree:
    """A search tree whose empty child links point to in-order neighbours.

    A missing right child links to the in-order successor and a missing left
    child to the predecessor; the header node stands in for both ends.
    """

    def __init__(self) -> None:
        head = _Node(None, has_left=True, has_right=True)
        head.left = head.right = head
        self._head = head

    def insert(self, key: Any) -> None:
        """Add ``key``; raise DuplicateKeyError if it is already present."""
        head = self._head
        node = _Node(key)
        if head.left is head:
            node.left = node.right = head
            head.left = node
            return

        parent = head.left
        while True:
            if key < parent.key:
                if not parent.has_left:
                    break
                parent = parent.left
            elif key > parent.key:
                if not parent.has_right:
                    break
                parent = parent.right
            else:
                raise DuplicateKeyError(f"duplicate key {key!r} not allowed")

        if key < parent.key:
            node.left = parent.left
            node.right = parent
            parent.left = node
            parent.has_left = True
        else:
            node.left = parent
            node.right = parent.right
            parent.right = node
            parent.has_right = True

    def _iter_inorder(self) -> Iterator[Any]:
        head = self._head
        node = head.left
        while node is not head:
            while node.has_left:
                node = node.left
            yield node.key
            while not node.has_right:
                node = node.right
                if node is head:
                    return
                yield node.key
            node = node.right

    def _iter_preorder(self) -> Iterator[Any]:
        head = self._head
        node = head.left
        while node is not head:
            while node.has_left:
                yield node.key
                node = node.left
            yield node.key
            while not node.has_right:
                node = node.right
                if node is head:
                    return
            node = node.right

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order, following the threads."""
        return list(self._iter_inorder())

    def preorder(self) -> list[Any]:
        """Return the keys root first, following the threads."""
        return list(self._iter_preorder())

    def postorder(self) -> list[Any]:
        """Return the keys with both subtrees before their root."""
        head = self._head
        if head.left is head:
            return []
        result: list[Any] = []
        stack: list[tuple[_Node, bool]] = [(head.left, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                result.append(node.key)
                continue
            stack.append((node, True))
            if node.has_right:
                stack.append((node.right, False))
            if node.has_left:
                stack.append((node.left, False))
        return result
"""Employee records kept in a binary search tree keyed by employee id."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """One employee record."""

    emp_id: int
    name: str
    salary: int


@dataclass(eq=False)
class _Node:
    employee: Employee
    left: _Node | None = None
    right: _Node | None = None


class EmployeeTree:
    """An unbalanced search tree of employees ordered by ``emp_id``."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, employee: Employee) -> None:
        """Add ``employee``; a record whose id is already present is ignored."""
        if self._root is None:
            self._root = _Node(employee)
            self._size += 1
            return
        node = self._root
        while True:
            if employee.emp_id < node.employee.emp_id:
                if node.left is None:
                    node.left = _Node(employee)
                    self._size += 1
                    return
                node = node.left
            elif employee.emp_id > node.employee.emp_id:
                if node.right is None:
                    node.right = _Node(employee)
                    self._size += 1
                    return
                node = node.right
            else:
                return

    def search(self, emp_id: int) -> Employee | None:
        """Return the employee with ``emp_id``, or None if there is none."""
        node = self._root
        while node is not None:
            if emp_id == node.employee.emp_id:
                return node.employee
            node = node.left if emp_id < node.employee.emp_id else node.right
        return None

    def __iter__(self) -> Iterator[Employee]:
        """Yield the employees in ascending order of id."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.employee
            node = node.right

    def __len__(self) -> int:
        return self._size
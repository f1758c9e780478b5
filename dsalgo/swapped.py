"""Locate the two misplaced elements of a sorted sequence in which two were swapped."""

from __future__ import annotations

from collections.abc import Sequence


def find_swapped(values: Sequence[int]) -> tuple[tuple[int, int], tuple[int, int]]:
    """Return ``((index, value), (index, value))`` of the two misplaced elements.

    The first is the left element of the first descent; the second is the
    right element of the second descent, or of the first descent when there
    is only one. Raise ValueError if the sequence is already in order.
    """
    first: tuple[int, int] | None = None
    first_descent = -1
    for i, (left, right) in enumerate(zip(values, values[1:])):
        if left > right:
            if first is None:
                first = (i, left)
                first_descent = i
            else:
                return first, (i + 1, right)
    if first is None:
        raise ValueError("no misplaced elements: the sequence is in order")
    return first, (first_descent + 1, values[first_descent + 1])
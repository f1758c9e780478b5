"""Brute-force solver for the puzzle EAT + THAT = APPLE."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import permutations

LETTERS = "EATHPL"


def _words(digits: Sequence[int]) -> tuple[int, int, int]:
    e, a, t, h, p, l = digits[:6]
    eat = e * 100 + a * 10 + t
    that = t * 1000 + h * 100 + a * 10 + t
    apple = a * 10000 + p * 1000 + p * 100 + l * 10 + e
    return eat, that, apple


def is_valid_solution(digits: Sequence[int]) -> bool:
    """Tell whether digits for E, A, T, H, P, L (in that order) satisfy the sum."""
    if len(digits) < 6:
        raise ValueError("six digits are needed: E, A, T, H, P, L")
    eat, that, apple = _words(digits)
    return eat + that == apple


def solve() -> dict[str, int] | None:
    """Return the first assignment of distinct digits, in lexicographic order, or None."""
    for digits in permutations(range(10), len(LETTERS)):
        if is_valid_solution(digits):
            return dict(zip(LETTERS, digits))
    return None
"""Factorial and Fibonacci sequence computed with an explicit stack."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return ``n!`` by pushing the factors on a stack and multiplying them off it."""
    if n < 0:
        raise ValueError("Invalid input for factorial")
    stack = list(range(2, n + 1))
    result = 1
    while stack:
        result *= stack.pop()
    return result


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting 0, 1.

    The two opening terms are always given, even when ``n`` is below two.
    """
    stack = [0, 1]
    a, b = stack
    for _ in range(2, n):
        a, b = b, a + b
        stack.append(b)
    return stack
"""Heap, merge and quick sort that also count the swaps they make."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _identity(item: Any) -> Any:
    return item


@dataclass
class SortResult(Generic[T]):
    """The sorted items and the number of swaps the algorithm counted."""

    items: list[T] = field(default_factory=list)
    swaps: int = 0


def heap_sort(
    items: Iterable[T], key: Callable[[T], Any] | None = None
) -> SortResult[T]:
    """Sort ascending with a max-heap.

    Every exchange made while sifting down, and every move of the heap's top
    to the end, counts as one swap.
    """
    arr = list(items)
    by = key or _identity
    swaps = 0

    def sift_down(size: int, index: int) -> None:
        nonlocal swaps
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and by(arr[child]) > by(arr[largest]):
                    largest = child
            if largest == index:
                return
            arr[index], arr[largest] = arr[largest], arr[index]
            swaps += 1
            index = largest

    size = len(arr)
    for index in range(size // 2 - 1, -1, -1):
        sift_down(size, index)
    for end in range(size - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        swaps += 1
        sift_down(end, 0)
    return SortResult(arr, swaps)


def merge_sort(
    items: Iterable[T], key: Callable[[T], Any] | None = None
) -> SortResult[T]:
    """Sort ascending and stably by merging.

    A swap is counted whenever an element of the right half is taken before
    the left half is used up.
    """
    by = key or _identity
    swaps = 0

    def sort(seq: list[T]) -> list[T]:
        nonlocal swaps
        if len(seq) <= 1:
            return seq
        middle = (len(seq) - 1) // 2 + 1
        left = sort(seq[:middle])
        right = sort(seq[middle:])
        merged: list[T] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if by(left[i]) <= by(right[j]):
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
                swaps += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    result = sort(list(items))
    return SortResult(result, swaps)


def quick_sort(
    items: Iterable[T], key: Callable[[T], Any] | None = None
) -> SortResult[T]:
    """Sort ascending by partitioning around the last element of each range.

    Every exchange counts as one swap, including an element exchanged with itself.
    """
    arr = list(items)
    by = key or _identity
    swaps = 0
    ranges = [(0, len(arr) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        pivot = by(arr[high])
        i = low - 1
        for j in range(low, high):
            if by(arr[j]) < pivot:
                i += 1
                arr[i], arr[j] = arr[j], arr[i]
                swaps += 1
        arr[i + 1], arr[high] = arr[high], arr[i + 1]
        swaps += 1
        split = i + 1
        ranges.append((split + 1, high))
        ranges.append((low, split - 1))
    return SortResult(arr, swaps)
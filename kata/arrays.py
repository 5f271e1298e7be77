"""List exercises: totals, searches, sorting and element shuffling."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

__all__ = [
    "average",
    "largest",
    "total",
    "binary_search",
    "linear_search",
    "bubble_sort",
    "delete_at",
    "insert_at",
    "merge",
    "reversed_list",
    "swap",
    "grow",
]

T = TypeVar("T")


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of ``values``; raises ValueError when empty."""
    if not values:
        raise ValueError("cannot average an empty sequence")
    return sum(values) / len(values)


def largest(values: Sequence[T]) -> T:
    """The largest element; raises ValueError when empty."""
    if not values:
        raise ValueError("cannot take the largest of an empty sequence")
    return max(values)


def total(values: Sequence[float]) -> float:
    """Sum of all elements (0 for an empty sequence)."""
    return sum(values)


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Index of ``key`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Index of the first element equal to ``key``, or None if absent."""
    return next((index for index, value in enumerate(values) if value == key), None)


def bubble_sort(values: Sequence[T]) -> list[T]:
    """A new list holding ``values`` in ascending order, sorted by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def delete_at(values: Sequence[T], index: int) -> list[T]:
    """A new list without the element at ``index``."""
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range for length {len(values)}")
    return [*values[:index], *values[index + 1:]]


def insert_at(values: Sequence[T], index: int, value: T) -> list[T]:
    """A new list with ``value`` placed at ``index`` (0 to len inclusive)."""
    if not 0 <= index <= len(values):
        raise IndexError(f"index {index} out of range for length {len(values)}")
    return [*values[:index], value, *values[index:]]


def merge(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Elements of ``first`` followed by those of ``second``."""
    return [*first, *second]


def reversed_list(values: Sequence[T]) -> list[T]:
    """A new list with the elements in reverse order."""
    return list(reversed(values))


def swap(a: T, b: T) -> tuple[T, T]:
    """The pair with its two values exchanged."""
    return b, a


def grow(values: Sequence[int], size: int) -> list[int]:
    """Resize to ``size`` elements; new slots hold their 1-based position."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    kept = list(values[:size])
    return kept + list(range(len(kept) + 1, size + 1))
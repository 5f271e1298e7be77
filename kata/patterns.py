"""Number and star triangles."""

from __future__ import annotations

from itertools import count, islice

__all__ = ["floyd_triangle", "half_pyramid"]


def floyd_triangle(rows: int) -> list[list[int]]:
    """Floyd's triangle: row i holds the next i consecutive integers from 1."""
    numbers = count(1)
    return [list(islice(numbers, i)) for i in range(1, rows + 1)]


def half_pyramid(rows: int) -> list[str]:
    """Rows of stars, row i holding i stars separated by spaces."""
    return [" ".join("*" * i) for i in range(1, rows + 1)]
"""Matrix exercises on lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["diagonal_sum", "multiply", "add", "transpose", "format_matrix"]

Matrix = Sequence[Sequence[float]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return rows, cols


def diagonal_sum(matrix: Matrix) -> float:
    """Sum of the main diagonal of a square matrix."""
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError(f"matrix is not square: {rows}x{cols}")
    return sum(row[i] for i, row in enumerate(matrix))


def multiply(a: Matrix, b: Matrix) -> list[list[float]]:
    """Matrix product ``a`` times ``b``."""
    _, a_cols = _shape(a)
    b_rows, _ = _shape(b)
    if a_cols != b_rows:
        raise ValueError(f"cannot multiply: {a_cols} columns against {b_rows} rows")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def add(a: Matrix, b: Matrix) -> list[list[float]]:
    """Element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices have different shapes")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def transpose(matrix: Matrix) -> list[list[float]]:
    """Rows become columns."""
    _shape(matrix)
    return [list(col) for col in zip(*matrix)]


def format_matrix(matrix: Matrix) -> str:
    """One line per row, elements separated by single spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)
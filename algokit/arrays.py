"""Array and matrix manipulations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "reversed_values",
    "left_rotate",
    "move_zeros",
    "max_hourglass_sum",
    "wave_order",
    "absolute_difference",
    "split_equal_sums",
    "multiply_matrices",
]


def _shape(matrix: Sequence[Sequence[Any]]) -> tuple[int, int]:
    rows = len(matrix)
    if rows == 0:
        return 0, 0
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def reversed_values(values: Iterable[Any]) -> list[Any]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def left_rotate(values: Sequence[Any], k: int) -> list[Any]:
    """Return values rotated left by k positions."""
    items = list(values)
    if not items:
        return items
    shift = k % len(items)
    return items[shift:] + items[:shift]


def move_zeros(values: Iterable[int]) -> list[int]:
    """Return values with every zero moved to the end, other order preserved."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def max_hourglass_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest hourglass sum in a grid of at least 3x3.

    An hourglass is the top row of three cells, the centre cell and the
    bottom row of three cells of a 3x3 window.
    """
    rows, cols = _shape(grid)
    if rows < 3 or cols < 3:
        raise ValueError("grid must be at least 3x3")
    return max(
        sum(grid[r][c : c + 3]) + grid[r + 1][c + 1] + sum(grid[r + 2][c : c + 3])
        for r in range(rows - 2)
        for c in range(cols - 2)
    )


def wave_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return elements column by column from the rightmost, alternating down and up."""
    rows, cols = _shape(matrix)
    result: list[Any] = []
    for step, col in enumerate(range(cols - 1, -1, -1)):
        column = [matrix[r][col] for r in range(rows)]
        result.extend(column if step % 2 == 0 else reversed(column))
    return result


def absolute_difference(n: int, k: int) -> int:
    """Return |n - k|."""
    return abs(n - k)


def split_equal_sums(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sorted halves with equal sums.

    Returns None when no such split is produced (n == 1 or n not a multiple of 4).
    """
    if n == 1 or n % 4 != 0:
        return None
    pairs = max(n // 4, 0)
    first = sorted([1 + 2 * t for t in range(pairs)] + [n - 2 * t for t in range(pairs)])
    second = sorted([2 + 2 * t for t in range(pairs)] + [n - 1 - 2 * t for t in range(pairs)])
    return first, second


def multiply_matrices(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the matrix product a x b.

    Raises ValueError when the column count of a differs from the row count of b.
    """
    a_rows, a_cols = _shape(a)
    b_rows, b_cols = _shape(b)
    if a_cols != b_rows:
        raise ValueError(
            f"cannot multiply a {a_rows}x{a_cols} matrix by a {b_rows}x{b_cols} matrix"
        )
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns] for row in a
    ]
"""Text patterns made of symbols, and simple text cleaning."""

from __future__ import annotations

import string

__all__ = [
    "hollow_triangle",
    "hollow_butterfly",
    "descending_pattern",
    "letters_only",
]


def _hollow_run(width: int) -> str:
    if width <= 1:
        return "*" * width
    return "*" + " " * (width - 2) + "*"


def hollow_triangle(rows: int) -> list[str]:
    """Return the lines of a hollow pyramid of stars with a solid base."""
    lines = []
    for row in range(1, rows + 1):
        width = 2 * row - 1
        body = "*" * width if row == rows else _hollow_run(width)
        lines.append(" " * (rows - row) + body)
    return lines


def hollow_butterfly(rows: int) -> list[str]:
    """Return the lines of a hollow butterfly whose upper half has the given rows."""
    sizes = list(range(1, rows + 1)) + list(range(rows, 0, -1))
    return [
        _hollow_run(size) + " " * (2 * rows - 2 * size) + _hollow_run(size)
        for size in sizes
    ]


def descending_pattern(count: int, symbol: str) -> list[str]:
    """Return lines of the symbol repeated count, count-1, ... 1 times."""
    if len(symbol) != 1:
        raise ValueError(f"symbol must be a single character, got {symbol!r}")
    return [symbol * size for size in range(count, 0, -1)]


def letters_only(text: str) -> str:
    """Return text with everything but ASCII letters removed."""
    return "".join(char for char in text if char in string.ascii_letters)
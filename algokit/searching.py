"""Searching sequences for a value."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["linear_search", "binary_search"]


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to target, or None."""
    return next((index for index, value in enumerate(values) if value == target), None)


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of target in ascending values, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if target < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None
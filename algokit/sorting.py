"""Comparison sorts and order statistics on sequences of comparable values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "iterative_merge_sort",
    "quick_sort",
    "hoare_quick_sort",
    "kth_smallest",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using bubble sort, stopping early on a pass without swaps."""
    items = list(values)
    for done in range(len(items)):
        swapped = False
        for pos in range(len(items) - done - 1):
            if items[pos] > items[pos + 1]:
                items[pos], items[pos + 1] = items[pos + 1], items[pos]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using insertion sort."""
    items: list[Any] = []
    for key in values:
        pos = len(items)
        items.append(key)
        while pos > 0 and items[pos - 1] > key:
            items[pos] = items[pos - 1]
            pos -= 1
        items[pos] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using selection sort."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        if smallest != start:
            items[start], items[smallest] = items[smallest], items[start]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a stably sorted copy using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def iterative_merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using bottom-up merge sort with doubling run widths."""
    items = list(values)
    width = 1
    while width < len(items):
        for low in range(0, len(items), 2 * width):
            mid = min(low + width, len(items))
            high = min(low + 2 * width, len(items))
            items[low:high] = _merge(items[low:mid], items[mid:high])
        width *= 2
    return items


def _lomuto_partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for pos in range(low, high):
        if items[pos] <= pivot:
            boundary += 1
            items[boundary], items[pos] = items[pos], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using quicksort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _lomuto_partition(items, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items


def hoare_quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using quicksort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        first, last = pending.pop()
        if first >= last:
            continue
        pivot = items[first]
        i, j = first, last
        while i < j:
            while items[i] <= pivot and i < last:
                i += 1
            while items[j] > pivot:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]
        items[first], items[j] = items[j], items[first]
        pending.append((first, j - 1))
        pending.append((j + 1, last))
    return items


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest value (1-based) using quickselect.

    Raises ValueError when k is outside 1..len(values).
    """
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    low, high = 0, len(items) - 1
    target = k - 1
    while True:
        split = _lomuto_partition(items, low, high)
        if split == target:
            return items[split]
        if split > target:
            high = split - 1
        else:
            low = split + 1
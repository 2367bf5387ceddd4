"""Comparison and counting sorts over sequences of comparable values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "merge_sort",
    "quick_sort",
    "counting_sort",
    "selection_sort",
    "bubble_sort",
    "insertion_sort",
    "cocktail_shaker_sort",
]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        # Taking from the left on ties keeps the sort stable.
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def _merge_sorted(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(_merge_sorted(items[:mid]), _merge_sorted(items[mid:]))


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with the values in ascending order (stable merge sort)."""
    return _merge_sorted(list(values))


def _partition(items: list[Any], low: int, high: int) -> int:
    """Lomuto partition around the last element; return the pivot's final index."""
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with the values in ascending order (quicksort, last-element pivot)."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ascending order using counting sort.

    Raises ValueError for a negative value and TypeError for a non-integer.
    """
    items = list(values)
    for item in items:
        if not isinstance(item, int):
            raise TypeError(f"counting sort needs integers, got {type(item).__name__}")
        if item < 0:
            raise ValueError(f"counting sort needs non-negative integers, got {item}")
    largest = max(items, default=0)
    counts = [0] * (largest + 1)
    for item in items:
        counts[item] += 1
    # starts[v] is the number of items smaller than v.
    starts = [0] * (largest + 2)
    for value, count in enumerate(counts):
        starts[value + 1] = starts[value] + count
    output = [0] * len(items)
    for item in reversed(items):
        starts[item + 1] -= 1
        output[starts[item + 1]] = item
    return output


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with the values in ascending order (selection sort)."""
    items = list(values)
    size = len(items)
    for i in range(size):
        min_index = min(range(i, size), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with the values in ascending order (bubble sort with early exit)."""
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


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with the values in ascending order (insertion sort)."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def cocktail_shaker_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with the values in ascending order (bidirectional bubble sort)."""
    items = list(values)
    start, end = 0, len(items) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        start += 1
    return items
"""Binary-search variants over sorted, rotated and mountain arrays, and prefix sums."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Any

__all__ = [
    "binary_search",
    "first_occurrence",
    "last_occurrence",
    "find_pivot",
    "peak_index",
    "search_rotated",
    "prefix_sums",
    "range_sum",
]


def _search_range(values: Sequence[Any], key: Any, start: int, end: int) -> int:
    """Binary search for key in values[start:end + 1]; raise ValueError if absent."""
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if values[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    raise ValueError(f"{key!r} is not in the sequence")


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Return an index of key in the ascending sequence; raise ValueError if absent."""
    return _search_range(values, key, 0, len(values) - 1)


def first_occurrence(values: Sequence[Any], key: Any) -> int:
    """Return the leftmost index of key in the ascending sequence; raise ValueError if absent."""
    index = bisect_left(values, key)
    if index == len(values) or values[index] != key:
        raise ValueError(f"{key!r} is not in the sequence")
    return index


def last_occurrence(values: Sequence[Any], key: Any) -> int:
    """Return the rightmost index of key in the ascending sequence; raise ValueError if absent."""
    index = bisect_right(values, key) - 1
    if index < 0 or values[index] != key:
        raise ValueError(f"{key!r} is not in the sequence")
    return index


def find_pivot(values: Sequence[Any]) -> int:
    """Return the index of the smallest element of a rotated ascending sequence.

    For a sequence that is not rotated at all, the last index is returned.
    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("find_pivot() of an empty sequence")
    first = values[0]
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] >= first:
            start = mid + 1
        else:
            end = mid
    return start


def peak_index(values: Sequence[Any]) -> int:
    """Return the index of the peak of a mountain sequence (rises, then falls).

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("peak_index() of an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def search_rotated(values: Sequence[Any], key: Any) -> int:
    """Return the index of key in a rotated ascending sequence; raise ValueError if absent."""
    if not values:
        raise ValueError(f"{key!r} is not in the sequence")
    pivot = find_pivot(values)
    last = len(values) - 1
    if values[pivot] <= key <= values[last]:
        return _search_range(values, key, pivot, last)
    return _search_range(values, key, 0, pivot - 1)


def prefix_sums(values: Iterable[Any]) -> list[Any]:
    """Return [0, v0, v0 + v1, ...]: one more entry than there are values."""
    return list(accumulate(values, initial=0))


def range_sum(prefix: Sequence[Any], left: int, right: int) -> Any:
    """Sum of the 1-based inclusive range left..right, from a table built by prefix_sums.

    Raises IndexError when the range falls outside the table.
    """
    if left < 1 or right >= len(prefix) or left > right + 1:
        raise IndexError(f"range {left}..{right} is outside 1..{len(prefix) - 1}")
    return prefix[right] - prefix[left - 1]
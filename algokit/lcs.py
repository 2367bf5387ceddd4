"""Longest common subsequence and the single common element problem."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional

__all__ = ["lcs_table", "longest_common_subsequence", "common_element"]


def lcs_table(x: Sequence[Any], y: Sequence[Any]) -> list[list[int]]:
    """Return the (len(x)+1) x (len(y)+1) table of LCS lengths of prefixes."""
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, a in enumerate(x, start=1):
        row, above = table[i], table[i - 1]
        for j, b in enumerate(y, start=1):
            row[j] = above[j - 1] + 1 if a == b else max(above[j], row[j - 1])
    return table


def longest_common_subsequence(x: Sequence[Any], y: Sequence[Any]) -> Any:
    """Return a longest common subsequence of x and y.

    The result is a string when x is a string and a list otherwise.
    """
    table = lcs_table(x, y)
    picked: list[Any] = []
    i, j = len(x), len(y)
    while table[i][j]:
        if x[i - 1] == y[j - 1]:
            picked.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    picked.reverse()
    if isinstance(x, str):
        return "".join(picked)
    return picked


def common_element(first: Iterable[Any], second: Iterable[Any]) -> Optional[Any]:
    """Return the last element of second that also occurs in first, or None."""
    seen = set(first)
    found = None
    for item in second:
        if item in seen:
            found = item
    return found
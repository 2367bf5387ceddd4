"""Breadth-first search for a path in a tree or graph given as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping
from typing import Optional

__all__ = ["sample_tree", "bfs_path"]


def sample_tree() -> dict[str, list[str]]:
    """Return a small binary tree: A has B and C, B has D and E, C has F and G."""
    return {
        "A": ["B", "C"],
        "B": ["D", "E"],
        "C": ["F", "G"],
    }


def bfs_path(
    tree: Mapping[Hashable, Iterable[Hashable]], start: Hashable, goal: Hashable
) -> Optional[list[Hashable]]:
    """Return a shortest path from start to goal, or None if goal is unreachable.

    Nodes missing from the mapping have no children.
    """
    parents: dict[Hashable, Optional[Hashable]] = {start: None}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == goal:
            path = []
            node: Optional[Hashable] = current
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return path
        for child in tree.get(current, ()):
            if child not in parents:
                parents[child] = current
                queue.append(child)
    return None
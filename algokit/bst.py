"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["BinarySearchTree"]


@dataclass
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Binary search tree where smaller values go left and equal or larger values go right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add value to the tree; duplicates are kept."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if node.value > value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of value; return whether anything was removed."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if node.value > value else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            # Replace with the in-order successor, then unlink the successor.
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.value = succ.value
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1
        return True

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.in_order())!r})"

    def in_order(self) -> Iterator[Any]:
        """Yield values left subtree, node, right subtree (ascending order)."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order(self) -> Iterator[Any]:
        """Yield values node, left subtree, right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[Any]:
        """Yield values left subtree, right subtree, node."""
        reversed_order: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)
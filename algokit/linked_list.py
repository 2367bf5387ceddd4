"""A singly linked list with a tail pointer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["SinglyLinkedList"]


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class SinglyLinkedList:
    """Singly linked list supporting append, pop from either end and iteration."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add value at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the last value; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        last = self._tail
        if self._head is last:
            self._head = self._tail = None
        else:
            node = self._head
            while node.next is not last:
                node = node.next
            node.next = None
            self._tail = node
        self._size -= 1
        return last.value

    def popleft(self) -> Any:
        """Remove and return the first value; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        first = self._head
        self._head = first.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return first.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
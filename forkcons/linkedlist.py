"""A doubly linked list and a FIFO queue built on it."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class LinkedList:
    """Doubly linked list with removal from either end or by position."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def append(self, data: Any) -> None:
        """Add ``data`` at the tail."""
        node = _Node(data, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove_first(self) -> Any:
        """Remove and return the head item; IndexError when empty."""
        node = self._head
        if node is None:
            raise IndexError("remove from empty list")
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        self._size -= 1
        return node.data

    def remove_last(self) -> Any:
        """Remove and return the tail item; IndexError when empty."""
        node = self._tail
        if node is None:
            raise IndexError("remove from empty list")
        self._tail = node.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        self._size -= 1
        return node.data

    def remove_at(self, index: int) -> Any:
        """Remove and return the item at ``index`` counted from the head."""
        if index < 0 or index >= self._size:
            raise IndexError("list index out of range")
        if index == 0:
            return self.remove_first()
        if index == self._size - 1:
            return self.remove_last()
        node = self._head
        for _ in range(index):
            node = node.next
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next


class LinkedListQueue:
    """First-in first-out queue backed by a LinkedList."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def push(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        self._list.append(data)

    def pop(self) -> Any:
        """Remove and return the front item; IndexError when empty."""
        if not self._list:
            raise IndexError("Queue is empty. No element to pop.")
        return self._list.remove_first()

    def __len__(self) -> int:
        return len(self._list)
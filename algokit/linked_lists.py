"""Singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["SinglyLinkedList", "DoublyLinkedList"]


@dataclass(eq=False)
class _SinglyNode:
    value: Any
    next: _SinglyNode | None = None


@dataclass(eq=False)
class _DoublyNode:
    value: Any
    prev: _DoublyNode | None = None
    next: _DoublyNode | None = None


class SinglyLinkedList:
    """A singly linked list supporting appends, pushes to the front and reversal."""

    def __init__(self, values: Iterable[Any] = ()):
        self._head: _SinglyNode | None = None
        self._tail: _SinglyNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add value at the end of the list."""
        node = _SinglyNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push(self, value: Any) -> None:
        """Add value at the front of the list."""
        self._head = _SinglyNode(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: _SinglyNode | None = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous, current = current, following
        self._head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """A doubly linked list with 1-based positional insertion and deletion."""

    def __init__(self, values: Iterable[Any] = ()):
        self._head: _DoublyNode | None = None
        self._tail: _DoublyNode | None = None
        self._size = 0
        for value in values:
            self.insert(self._size + 1, value)

    def _node_at(self, position: int) -> _DoublyNode:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, position: int, value: Any) -> None:
        """Insert value so that it ends up at the 1-based position.

        Positions 1 through len(self) + 1 are valid; others raise IndexError.
        """
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} not found")
        node = _DoublyNode(value)
        if position == self._size + 1:
            node.prev = self._tail
            if self._tail is None:
                self._head = node
            else:
                self._tail.next = node
            self._tail = node
        else:
            after = self._node_at(position)
            node.prev, node.next = after.prev, after
            if after.prev is None:
                self._head = node
            else:
                after.prev.next = node
            after.prev = node
        self._size += 1

    def _unlink(self, node: _DoublyNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def delete_first(self) -> Any:
        """Remove and return the first value; IndexError if the list is empty."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._head)

    def delete_last(self) -> Any:
        """Remove and return the last value; IndexError if the list is empty."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._tail)

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at the 1-based position."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} not found")
        return self._unlink(self._node_at(position))

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "<=>".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
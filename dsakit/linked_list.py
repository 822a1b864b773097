"""Singly and doubly linked lists with deque-like operations at both ends."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY_MESSAGE = "Empty list"


class _SingleNode(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: _SingleNode[T] | None = None


class _DoubleNode(Generic[T]):
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: _DoubleNode[T] | None = None
        self.prev: _DoubleNode[T] | None = None


class DoublyLinkedList(Generic[T]):
    """A list whose nodes link both forwards and backwards."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: _DoubleNode[T] | None = None
        self._tail: _DoubleNode[T] | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def first(self) -> T:
        """Return the element at the front; raise IndexError when empty."""
        if self._head is None:
            raise IndexError(_EMPTY_MESSAGE)
        return self._head.data

    def last(self) -> T:
        """Return the element at the back; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError(_EMPTY_MESSAGE)
        return self._tail.data

    def pop_first(self) -> None:
        """Remove the front element; does nothing on an empty list."""
        if self._head is None:
            return
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1

    def pop_last(self) -> None:
        """Remove the back element; does nothing on an empty list."""
        if self._tail is None:
            return
        self._tail = self._tail.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1

    def push_back(self, data: T) -> None:
        """Append an element at the back."""
        node = _DoubleNode(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def push_front(self, data: T) -> None:
        """Insert an element at the front."""
        node = _DoubleNode(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoublyLinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __copy__(self) -> DoublyLinkedList[T]:
        return type(self)(self)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SinglyLinkedList(Generic[T]):
    """A list whose nodes link forwards only, with a tail pointer."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: _SingleNode[T] | None = None
        self._tail: _SingleNode[T] | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def first(self) -> T:
        """Return the element at the front; raise IndexError when empty."""
        if self._head is None:
            raise IndexError(_EMPTY_MESSAGE)
        return self._head.data

    def last(self) -> T:
        """Return the element at the back; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError(_EMPTY_MESSAGE)
        return self._tail.data

    def pop_first(self) -> None:
        """Remove the front element; does nothing on an empty list."""
        if self._head is None:
            return
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1

    def pop_last(self) -> None:
        """Remove the back element; does nothing on an empty list."""
        if self._head is None:
            return
        if self._head is self._tail:
            self._head = self._tail = None
        else:
            node = self._head
            while node.next is not self._tail:
                node = node.next
            node.next = None
            self._tail = node
        self._size -= 1

    def push_back(self, data: T) -> None:
        """Append an element at the back."""
        node = _SingleNode(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def push_front(self, data: T) -> None:
        """Insert an element at the front."""
        node = _SingleNode(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head = node
        self._size += 1

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SinglyLinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __copy__(self) -> SinglyLinkedList[T]:
        return type(self)(self)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Build a list by pushing to the front and print it."""
    del argv
    items: DoublyLinkedList[int] = DoublyLinkedList()
    for value in [1, 2, 3, 4, 5, 6]:
        items.push_front(value)
    sys.stdout.write(f"{items}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
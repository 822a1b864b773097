"""Stacks: an abstract interface, a linked stack and a resizable stack."""

from __future__ import annotations

import copy
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

from dsakit.linked_list import SinglyLinkedList

T = TypeVar("T")

DEFAULT_CAPACITY = 16


class EmptyStackError(IndexError):
    """Raised when reading from an empty stack."""

    def __init__(self, message: str = "Stack is empty") -> None:
        super().__init__(message)


class AbstractStack(ABC, Generic[T]):
    """The operations every stack provides."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""

    @abstractmethod
    def push(self, item: T) -> None:
        """Place an element on top."""

    @abstractmethod
    def pop(self) -> T:
        """Remove and return the top element."""

    @abstractmethod
    def peek(self) -> T:
        """Return the top element without removing it."""

    def _ensure_not_empty(self) -> None:
        if self.is_empty():
            raise EmptyStackError()


class LinkedStack(AbstractStack[T]):
    """A stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._items: SinglyLinkedList[T] = SinglyLinkedList()

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: T) -> None:
        self._items.push_front(item)

    def pop(self) -> T:
        top = self.peek()
        self._items.pop_first()
        return top

    def peek(self) -> T:
        self._ensure_not_empty()
        return self._items.first()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Yield the elements from top to bottom."""
        return iter(self._items)

    def __copy__(self) -> LinkedStack[T]:
        clone: LinkedStack[T] = LinkedStack()
        clone._items = copy.copy(self._items)
        return clone

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


class ResizableStack(AbstractStack[T]):
    """An array-backed stack whose capacity doubles when full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The number of elements the stack holds before growing."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: T) -> None:
        if len(self._items) == self._capacity:
            self._capacity = max(self._capacity * 2, 1)
        self._items.append(item)

    def pop(self) -> T:
        self._ensure_not_empty()
        return self._items.pop()

    def peek(self) -> T:
        self._ensure_not_empty()
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __copy__(self) -> ResizableStack[T]:
        clone: ResizableStack[T] = ResizableStack(self._capacity)
        clone._items = list(self._items)
        return clone

    def __repr__(self) -> str:
        return f"ResizableStack({self._items!r}, capacity={self._capacity})"


def main(argv: list[str] | None = None) -> int:
    """Exercise a linked stack and print what it reports."""
    del argv
    stack: LinkedStack[int] = LinkedStack()
    lines = [int(stack.is_empty())]
    stack.push(10)
    lines += [int(stack.is_empty()), stack.peek()]
    stack.pop()
    lines.append(int(stack.is_empty()))
    for value in range(100):
        stack.push(value)
    lines.append(stack.peek())
    sys.stdout.write("".join(f"{line}\n" for line in lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
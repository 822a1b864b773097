"""A self-balancing AVL search tree of comparable values."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from dsakit.search_tree import InvalidPathError

T = TypeVar("T")


@dataclass(eq=False)
class AVLNode(Generic[T]):
    """A tree node that records the height of its subtree; a leaf has 0."""

    data: T
    height: int = 0
    left: AVLNode[T] | None = None
    right: AVLNode[T] | None = None


def _height(node: AVLNode[T] | None) -> int:
    return -1 if node is None else node.height


def _update_height(node: AVLNode[T]) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: AVLNode[T]) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(x: AVLNode[T]) -> AVLNode[T]:
    y = x.right
    if y is None:
        raise ValueError("A left rotation needs a right child")
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _rotate_right(x: AVLNode[T]) -> AVLNode[T]:
    y = x.left
    if y is None:
        raise ValueError("A right rotation needs a left child")
    x.left = y.right
    y.right = x
    _update_height(x)
    _update_height(y)
    return y


def _insert(node: AVLNode[T], data: T) -> AVLNode[T]:
    if node.left is None and data < node.data:
        node.left = AVLNode(data)
        _update_height(node)
        return node
    if node.right is None and not data < node.data:
        node.right = AVLNode(data)
        _update_height(node)
        return node
    if data < node.data:
        node.left = _insert(node.left, data)
    else:
        node.right = _insert(node.right, data)

    balance = _balance(node)
    if balance == 2:
        if _balance(node.left) == -1:
            node.left = _rotate_left(node.left)
        node = _rotate_right(node)
    elif balance == -2:
        if _balance(node.right) == 1:
            node.right = _rotate_right(node.right)
        node = _rotate_left(node)
    _update_height(node)
    return node


def _copy_subtree(node: AVLNode[T] | None) -> AVLNode[T] | None:
    if node is None:
        return None
    return AVLNode(
        node.data,
        node.height,
        _copy_subtree(node.left),
        _copy_subtree(node.right),
    )


class AVLTree(Generic[T]):
    """A binary search tree kept balanced by rotations; equal values go right."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.root: AVLNode[T] | None = None
        for item in items:
            self.add(item)

    def add(self, data: T) -> None:
        """Insert a value and rebalance the tree."""
        if self.root is None:
            self.root = AVLNode(data)
            return
        self.root = _insert(self.root, data)

    def add_at(self, where: str, data: T) -> None:
        """Place a leaf at the end of a path such as 'LR', without balancing."""
        if not where:
            if self.root is not None:
                raise InvalidPathError("The tree already has a root")
            self.root = AVLNode(data)
            return
        if self.root is None:
            raise InvalidPathError("The tree has no root yet")
        if any(step not in "LR" for step in where):
            raise InvalidPathError(f"Path may hold only 'L' and 'R': {where!r}")
        parent: AVLNode[T] | None = self.root
        for step in where[:-1]:
            parent = parent.left if step == "L" else parent.right
            if parent is None:
                raise InvalidPathError("Invalid path")
        node = AVLNode(data)
        if where[-1] == "L":
            parent.left = node
        else:
            parent.right = node

    def height(self) -> int:
        """Return the stored height of the root, or -1 for an empty tree."""
        return _height(self.root)

    def levels(self) -> list[list[T]]:
        """Return the values grouped by depth, each level left to right."""
        result: list[list[T]] = []
        queue: deque[tuple[AVLNode[T], int]] = deque()
        if self.root is not None:
            queue.append((self.root, 0))
        while queue:
            node, depth = queue.popleft()
            if depth == len(result):
                result.append([])
            result[depth].append(node.data)
            for child in (node.left, node.right):
                if child is not None:
                    queue.append((child, depth + 1))
        return result

    def format_levels(self) -> str:
        """Return one line per level, values separated by spaces."""
        return "".join(
            " ".join(str(item) for item in level) + "\n" for level in self.levels()
        )

    def __iter__(self) -> Iterator[T]:
        """Yield the values in sorted (in-order) order."""
        pending: list[AVLNode[T]] = []
        current = self.root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current.data
            current = current.right

    def __copy__(self) -> AVLTree[T]:
        clone: AVLTree[T] = AVLTree()
        clone.root = _copy_subtree(self.root)
        return clone

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Insert 0..99 in order, print the tree by level and the root height."""
    del argv
    tree: AVLTree[int] = AVLTree(range(100))
    out = sys.stdout
    out.write(tree.format_levels())
    out.write(f"{tree.height()}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
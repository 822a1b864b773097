"""Binary trees: one built by explicit paths and a binary search tree."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """A node holding one value and links to two children."""

    data: T
    left: TreeNode[T] | None = None
    right: TreeNode[T] | None = None


class InvalidPathError(ValueError):
    """Raised when a path of 'L'/'R' steps does not lead to a free place."""


def _copy_subtree(node: TreeNode[T] | None) -> TreeNode[T] | None:
    if node is None:
        return None
    clone = TreeNode(node.data)
    pending = [(node, clone)]
    while pending:
        source, target = pending.pop()
        if source.left is not None:
            target.left = TreeNode(source.left.data)
            pending.append((source.left, target.left))
        if source.right is not None:
            target.right = TreeNode(source.right.data)
            pending.append((source.right, target.right))
    return clone


def _preorder(node: TreeNode[T] | None) -> Iterator[T]:
    pending = [node] if node is not None else []
    while pending:
        current = pending.pop()
        yield current.data
        if current.right is not None:
            pending.append(current.right)
        if current.left is not None:
            pending.append(current.left)


def _inorder(node: TreeNode[T] | None) -> Iterator[T]:
    pending: list[TreeNode[T]] = []
    current = node
    while pending or current is not None:
        while current is not None:
            pending.append(current)
            current = current.left
        current = pending.pop()
        yield current.data
        current = current.right


class BinaryTree(Generic[T]):
    """A binary tree whose shape is given by the caller, node by node."""

    def __init__(self) -> None:
        self._root: TreeNode[T] | None = None

    def add(self, where: str, data: T) -> None:
        """Place a value at the end of a path such as 'LR'; '' is the root."""
        if not where:
            if self._root is not None:
                raise InvalidPathError("The tree already has a root")
            self._root = TreeNode(data)
            return
        if self._root is None:
            raise InvalidPathError("The tree has no root yet")
        if any(step not in "LR" for step in where):
            raise InvalidPathError(f"Path may hold only 'L' and 'R': {where!r}")
        parent: TreeNode[T] | None = self._root
        for step in where[:-1]:
            parent = parent.left if step == "L" else parent.right
            if parent is None:
                raise InvalidPathError("Invalid path")
        node = TreeNode(data)
        if where[-1] == "L":
            parent.left = node
        else:
            parent.right = node

    def __contains__(self, data: object) -> bool:
        return any(item == data for item in _preorder(self._root))

    def __iter__(self) -> Iterator[T]:
        """Yield the values in pre-order: node, left subtree, right subtree."""
        return _preorder(self._root)

    def __copy__(self) -> BinaryTree[T]:
        clone: BinaryTree[T] = BinaryTree()
        clone._root = _copy_subtree(self._root)
        return clone

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"BinaryTree({list(self)!r})"


class SearchTree(Generic[T]):
    """An unbalanced binary search tree; equal values go to the right."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._root: TreeNode[T] | None = None
        for item in items:
            self.add(item)

    def add(self, data: T) -> None:
        """Insert a value, keeping the search order."""
        node = TreeNode(data)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if data < current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, data: object) -> bool:
        current = self._root
        while current is not None:
            if current.data == data:
                return True
            current = current.left if data < current.data else current.right
        return False

    def __iter__(self) -> Iterator[T]:
        """Yield the values in sorted (in-order) order."""
        return _inorder(self._root)

    def __copy__(self) -> SearchTree[T]:
        clone: SearchTree[T] = SearchTree()
        clone._root = _copy_subtree(self._root)
        return clone

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"SearchTree({list(self)!r})"


def main(argv: list[str] | None = None) -> int:
    """Fill a search tree, print it and report two membership checks."""
    del argv
    tree: SearchTree[int] = SearchTree([0, 1, 4, 2, 3])
    out = sys.stdout
    out.write(f"{tree}\n")
    out.write(f"{int(4 in tree)} {int(-1 in tree)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
# dsakit

A small collection of classic data structures. It is written in plain Python
and needs no third-party packages:

- `dsakit.linked_list`: `DoublyLinkedList` and `SinglyLinkedList`
- `dsakit.stack`: `LinkedStack` and `ResizableStack`. Both are built on the
  `AbstractStack` interface and raise `EmptyStackError` when read while empty.
- `dsakit.search_tree`: `SearchTree`, an unbalanced binary search tree, and
  `BinaryTree`, a tree you build by explicit `L`/`R` paths
- `dsakit.avl_tree`: `AVLTree`, a self-balancing binary search tree

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Linked lists

```python
from dsakit.linked_list import DoublyLinkedList

items = DoublyLinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
print(list(items))   # [0, 1, 2, 3, 4]
print(len(items))    # 5
print(items)         # 0 1 2 3 4
items.pop_first()
items.pop_last()
print(items.first(), items.last())   # 1 3
```

`SinglyLinkedList` offers the same operations.

- `first()` and `last()` raise `IndexError` on an empty list.
- `pop_first()` and `pop_last()` remove an element without returning it. On an
  empty list they do nothing.
- A list compares equal to another list of the same kind that holds equal
  elements in the same order.
- A list can be duplicated with `copy.copy`.

### Stacks

```python
from dsakit.stack import LinkedStack, ResizableStack, EmptyStackError

stack = ResizableStack(16)
stack.push(10)
print(stack.peek())      # 10
print(stack.pop())       # 10
print(stack.is_empty())  # True

try:
    stack.pop()
except EmptyStackError:
    print("nothing to pop")
```

`ResizableStack` starts with a capacity of 16 by default. It doubles its
`capacity` when a push finds it full, and a negative capacity raises
`ValueError`.

`LinkedStack` keeps its items in linked nodes. Iterating over it yields the
items from the top down.

Both stacks:

- support `len()`;
- can be duplicated with `copy.copy`;
- raise `EmptyStackError` from `pop()` and `peek()` when empty. `EmptyStackError`
  is a subclass of `IndexError`.

### Search trees

```python
from dsakit.search_tree import SearchTree

tree = SearchTree([0, 1, 4, 2, 3])
print(list(tree))          # in-order: [0, 1, 2, 3, 4]
print(4 in tree, -1 in tree)   # True False
```

In a `SearchTree`, values equal to a node go into its right subtree.

`BinaryTree.add(where, data)` places a value by a path of `L` and `R` steps
from the root, and an empty path sets the root. `InvalidPathError` (a
`ValueError`) is raised in these cases:

- the path passes through a missing node;
- the path holds any other character;
- a root is set twice;
- a non-empty path is given before the root exists.

A `BinaryTree` iterates in pre-order, and `in` searches every node.

### AVL trees

```python
from dsakit.avl_tree import AVLTree

tree = AVLTree(range(100))
print(tree.format_levels())   # one line per level of the tree
print(tree.levels())          # the same, as lists of values
print(list(tree))             # values in sorted order
print(tree.height())          # height of the root; -1 for an empty tree
```

Inserting with `add()` keeps the tree balanced by single and double
rotations. `add_at(where, data)` places a leaf by an `L`/`R` path, the way
`BinaryTree.add` does. It does not rebalance the tree or update stored
heights. The nodes are `AVLNode` objects, reachable from `tree.root`.

## Command-line demos

Each structure has a short demonstration command:

```
dsakit-list          # pushes 1..6 to the front of a list and prints "6 5 4 3 2 1"
dsakit-stack         # pushes and pops on a LinkedStack, printing its state
dsakit-search-tree   # fills a SearchTree, prints it and two membership checks
dsakit-avl           # inserts 0..99 into an AVLTree, prints it by level and its height
```

The commands take no options.
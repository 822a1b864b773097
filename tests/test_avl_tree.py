import copy
import math
import random

import pytest

from dsakit.avl_tree import AVLNode, AVLTree, main
from dsakit.search_tree import InvalidPathError


def _check_node(node):
    """Return the true height of a subtree, asserting AVL invariants."""
    if node is None:
        return -1
    left = _check_node(node.left)
    right = _check_node(node.right)
    assert abs(left - right) <= 1
    assert node.height == 1 + max(left, right)
    if node.left is not None:
        assert node.left.data < node.data
    if node.right is not None:
        assert not node.right.data < node.data
    return node.height


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == -1
    assert tree.levels() == []
    assert tree.format_levels() == ""
    assert list(tree) == []


def test_single_node_has_height_zero():
    tree = AVLTree([42])
    assert tree.height() == 0
    assert tree.levels() == [[42]]


def test_rotation_on_ascending_three():
    assert AVLTree([1, 2, 3]).levels() == [[2], [1, 3]]


def test_rotation_on_descending_three():
    assert AVLTree([3, 2, 1]).levels() == [[2], [1, 3]]


def test_double_rotation_cases():
    assert AVLTree([3, 1, 2]).levels() == [[2], [1, 3]]
    assert AVLTree([1, 3, 2]).levels() == [[2], [1, 3]]


@pytest.mark.parametrize("count", [1, 2, 7, 50, 100, 500])
def test_sequential_insert_stays_balanced(count):
    tree = AVLTree(range(count))
    _check_node(tree.root)
    assert list(tree) == list(range(count))
    assert tree.height() <= 1.45 * math.log2(count + 2)


def test_levels_cover_all_values():
    items = list(range(40))
    tree = AVLTree(items)
    levels = tree.levels()
    assert len(levels) == tree.height() + 1
    assert sorted(v for level in levels for v in level) == items
    assert levels[0] == [tree.root.data]


def test_format_levels_matches_levels():
    tree = AVLTree(range(10))
    lines = tree.format_levels().splitlines()
    assert lines == [" ".join(str(v) for v in level) for level in tree.levels()]


def test_str_matches_iteration():
    tree = AVLTree([5, 1, 9, 3])
    assert str(tree) == "1 3 5 9"


def test_add_at_builds_given_shape():
    tree = AVLTree()
    tree.add_at("", 5)
    tree.add_at("L", 3)
    tree.add_at("R", 8)
    tree.add_at("LR", 4)
    assert tree.levels() == [[5], [3, 8], [4]]
    assert tree.root.left.right.height == 0


def test_add_at_errors():
    tree = AVLTree()
    with pytest.raises(InvalidPathError):
        tree.add_at("L", 1)
    tree.add_at("", 1)
    with pytest.raises(InvalidPathError):
        tree.add_at("", 2)
    with pytest.raises(InvalidPathError):
        tree.add_at("RL", 2)
    with pytest.raises(InvalidPathError):
        tree.add_at("Q", 2)


def test_copy_is_deep_and_keeps_heights():
    tree = AVLTree(range(20))
    clone = copy.copy(tree)
    assert clone.root is not tree.root
    _check_node(clone.root)
    assert clone.levels() == tree.levels()
    clone.add(100)
    assert 100 not in list(tree)
    assert list(tree) == list(range(20))


def test_avl_node_defaults():
    node = AVLNode(3)
    assert (node.data, node.height, node.left, node.right) == (3, 0, None, None)


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    expected = AVLTree(range(100))
    assert lines[-1] == str(expected.height())
    assert lines[:-1] == expected.format_levels().splitlines()
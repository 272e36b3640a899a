import random

import pytest

from dsalgo.avl import AVLTree


def _check(node):
    """Verify AVL and ordering invariants; return the subtree height."""
    if node is None:
        return 0
    left = _check(node.left)
    right = _check(node.right)
    assert abs(left - right) <= 1
    assert node.height == 1 + max(left, right)
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    return 1 + max(left, right)


def test_iteration_is_sorted():
    values = [50, 20, 70, 10, 30, 60, 80, 25]
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)
    _check(tree.root)


def test_duplicates_ignored():
    tree = AVLTree()
    tree.insert(5)
    tree.insert(5)
    assert len(tree) == 1
    assert list(tree) == [5]


def test_ascending_inserts_stay_balanced():
    tree = AVLTree()
    for value in range(1, 8):
        tree.insert(value)
    assert tree.height() == 2
    assert tree.balance_factor() == 0
    assert _check(tree.root) - 1 == tree.height()


@pytest.mark.parametrize("order", [list(range(100)), list(range(100, 0, -1))])
def test_monotonic_inserts(order):
    tree = AVLTree()
    for value in order:
        tree.insert(value)
    assert list(tree) == sorted(order)
    _check(tree.root)


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == -1
    assert tree.search(1) is None
    assert 1 not in tree
    assert tree.to_brackets() == ""


def test_search_and_contains():
    tree = AVLTree()
    for value in [8, 3, 10, 1, 6]:
        tree.insert(value)
    assert tree.search(6).key == 6
    assert tree.search(7) is None
    assert 10 in tree
    assert 11 not in tree


@pytest.mark.parametrize("target", [1, 3, 8, 10, 6])
def test_delete_various_positions(target):
    values = [8, 3, 10, 1, 6, 14, 4]
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    tree.delete(target)
    assert target not in tree
    assert list(tree) == sorted(v for v in values if v != target)
    _check(tree.root)


def test_delete_missing_is_noop():
    tree = AVLTree()
    for value in [2, 1, 3]:
        tree.insert(value)
    tree.delete(42)
    assert list(tree) == [1, 2, 3]
    assert len(tree) == 3


def test_delete_last_node_empties_tree():
    tree = AVLTree()
    tree.insert(9)
    tree.delete(9)
    assert tree.root is None
    assert len(tree) == 0


def test_random_workload_keeps_invariants():
    rng = random.Random(1234)
    tree = AVLTree()
    present = set()
    for _ in range(300):
        value = rng.randrange(500)
        tree.insert(value)
        present.add(value)
    for value in rng.sample(sorted(present), len(present) // 2):
        tree.delete(value)
        present.discard(value)
    assert list(tree) == sorted(present)
    assert len(tree) == len(present)
    _check(tree.root)


def test_brackets_single_node():
    tree = AVLTree()
    tree.insert(5)
    assert tree.to_brackets() == " ( 5  ()  () ) "


def test_brackets_contains_every_key_in_preorder():
    tree = AVLTree()
    for value in [2, 1, 3]:
        tree.insert(value)
    text = tree.to_brackets()
    assert text.index("2") < text.index("1") < text.index("3")
    assert text.count("(") == text.count(")")
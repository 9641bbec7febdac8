import random

from algolab.bst import BinarySearchTree


def _build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def test_iteration_is_sorted():
    rng = random.Random(3)
    values = [rng.randint(0, 1000) for _ in range(300)]
    assert list(_build(values)) == sorted(values)


def test_membership():
    tree = _build([8, 3, 10, 1, 6])
    for value in (8, 3, 10, 1, 6):
        assert value in tree
    assert 7 not in tree
    assert 0 not in BinarySearchTree()


def test_duplicates_are_kept():
    tree = _build([5, 5, 5])
    assert len(tree) == 3
    assert list(tree) == [5, 5, 5]


def test_height_of_empty_and_single():
    assert BinarySearchTree().height() == -1
    assert _build([1]).height() == 0


def test_sorted_input_degenerates_to_chain():
    values = list(range(1, 51))
    tree = _build(values)
    assert tree.height() == len(values) - 1


def test_balance_minimises_height_and_keeps_values():
    values = list(range(1, 1024))
    tree = _build(values)
    tree.balance()
    assert list(tree) == values
    assert len(tree) == len(values)
    assert 2 ** (tree.height() + 1) - 1 == len(values)
    assert all(value in tree for value in values)


def test_balance_empty_tree():
    tree = BinarySearchTree()
    tree.balance()
    assert tree.height() == -1


def test_clear():
    tree = _build([4, 2, 6])
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []
    assert 4 not in tree
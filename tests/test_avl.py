import math
import random

from algolab.avl import AVLTree


def _build(values):
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    return tree


def _avl_bound(n):
    return 1.4405 * math.log2(n + 2)


def test_iteration_sorted_and_unique():
    rng = random.Random(11)
    values = [rng.randint(0, 500) for _ in range(400)]
    tree = _build(values)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))


def test_duplicate_insert_reports_false():
    tree = AVLTree()
    assert tree.insert(4) is True
    assert tree.insert(4) is False
    assert len(tree) == 1


def test_membership():
    tree = _build([30, 20, 40, 10, 25])
    assert all(v in tree for v in (30, 20, 40, 10, 25))
    assert 35 not in tree


def test_empty_height():
    assert AVLTree().height() == 0
    assert _build([1]).height() == 1


def test_sorted_input_stays_balanced():
    n = 5000
    tree = _build(range(n))
    assert tree.height() <= _avl_bound(n)
    assert list(tree) == list(range(n))


def test_reverse_and_zigzag_inputs_stay_balanced():
    for values in (list(range(2000, 0, -1)), [v for i in range(1000) for v in (i, 5000 - i)]):
        tree = _build(values)
        assert tree.height() <= _avl_bound(len(tree))
        assert list(tree) == sorted(set(values))


def test_clear():
    tree = _build([1, 2, 3])
    tree.clear()
    assert len(tree) == 0
    assert tree.height() == 0
    assert 2 not in tree
import random

import pytest

from algolab.graph_io import zero_matrix
from algolab.mst import prim_mst_list, prim_mst_matrix


def _random_connected(n, density, seed):
    rng = random.Random(seed)
    w = zero_matrix(n)
    for i in range(n - 1):
        wt = rng.randint(1, 1000)
        w[i][i + 1] = w[i + 1][i] = wt
    for u in range(n):
        for v in range(u + 1, n):
            if not w[u][v] and rng.random() < density:
                wt = rng.randint(1, 1000)
                w[u][v] = w[v][u] = wt
    return w


def test_triangle():
    weight = [[0, 1, 3], [1, 0, 2], [3, 2, 0]]
    assert prim_mst_matrix(weight) == 3
    assert prim_mst_list(weight) == 3


def test_tree_weight_is_sum_of_its_edges():
    rng = random.Random(3)
    n = 12
    weight = zero_matrix(n)
    edge_weights = []
    for v in range(1, n):
        parent = rng.randrange(v)
        wt = rng.randint(1, 50)
        weight[parent][v] = weight[v][parent] = wt
        edge_weights.append(wt)
    assert prim_mst_matrix(weight) == sum(edge_weights)
    assert prim_mst_list(weight) == sum(edge_weights)


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("density", [0.3, 0.7])
def test_matrix_and_list_agree(seed, density):
    weight = _random_connected(30, density, seed)
    assert prim_mst_matrix(weight) == prim_mst_list(weight)


@pytest.mark.parametrize("seed", range(3))
def test_mst_not_heavier_than_chain(seed):
    weight = _random_connected(20, 0.5, seed)
    chain = sum(weight[i][i + 1] for i in range(19))
    assert prim_mst_matrix(weight) <= chain


def test_single_vertex_and_empty():
    assert prim_mst_matrix([[0]]) == 0
    assert prim_mst_list([]) == 0


def test_disconnected_graph_raises():
    weight = [[0, 4, 0, 0], [4, 0, 0, 0], [0, 0, 0, 2], [0, 0, 2, 0]]
    with pytest.raises(ValueError):
        prim_mst_matrix(weight)
    with pytest.raises(ValueError):
        prim_mst_list(weight)
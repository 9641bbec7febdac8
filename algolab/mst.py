"""Prim's minimum spanning tree weight on weighted adjacency matrices."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

from algolab.graph_io import matrix_to_list

__all__ = ["prim_mst_matrix", "prim_mst_list"]


def _prim(
    weight: Sequence[Sequence[int]], neighbours: Callable[[int], Iterable[int]]
) -> int:
    n = len(weight)
    in_tree = [False] * n
    best: list[float] = [math.inf] * n
    if n:
        best[0] = 0
    total = 0
    for _ in range(n):
        u = min((i for i in range(n) if not in_tree[i]), key=best.__getitem__)
        if best[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        total += int(best[u])
        for v in neighbours(u):
            if not in_tree[v] and weight[u][v] < best[v]:
                best[v] = weight[u][v]
    return total


def prim_mst_matrix(weight: Sequence[Sequence[int]]) -> int:
    """Total weight of a minimum spanning tree, scanning each matrix row.

    A zero cell means no edge. Raises ValueError for a disconnected graph.
    """
    return _prim(weight, lambda u: [v for v, w in enumerate(weight[u]) if w])


def prim_mst_list(weight: Sequence[Sequence[int]]) -> int:
    """Total weight of a minimum spanning tree, walking adjacency lists.

    The lists are built from the matrix first; a zero cell means no edge.
    Raises ValueError for a disconnected graph.
    """
    adjacency = matrix_to_list(weight)
    return _prim(weight, adjacency.__getitem__)
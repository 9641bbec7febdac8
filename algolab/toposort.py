"""Topological sorting of directed acyclic graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence

__all__ = ["topological_sort_matrix", "topological_sort_kahn", "topological_sort_list"]


def topological_sort_matrix(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Order the vertices by depth-first search over an adjacency matrix.

    Vertices are visited from index 0 upward and their neighbours in
    ascending order; the result is the reversed finishing order.
    """
    n = len(matrix)
    visited = [False] * n
    finished: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(range(n)))]
        while stack:
            u, candidates = stack[-1]
            for v in candidates:
                if matrix[u][v] and not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(range(n))))
                    break
            else:
                stack.pop()
                finished.append(u)
    finished.reverse()
    return finished


def _kahn(n: int, successors: Callable[[int], Iterable[int]]) -> list[int]:
    indegree = [0] * n
    for u in range(n):
        for v in successors(u):
            indegree[v] += 1
    queue = deque(u for u in range(n) if indegree[u] == 0)
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in successors(u):
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    if len(order) < n:
        raise ValueError("graph contains a cycle")
    return order


def topological_sort_kahn(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Order the vertices with Kahn's algorithm, scanning an adjacency matrix.

    Raises ValueError when the graph has a cycle.
    """
    return _kahn(len(matrix), lambda u: [v for v, cell in enumerate(matrix[u]) if cell])


def topological_sort_list(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order the vertices with Kahn's algorithm over adjacency lists.

    Raises ValueError when the graph has a cycle.
    """
    return _kahn(len(adjacency), adjacency.__getitem__)
"""Adjacency-matrix files and conversion to adjacency lists."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

__all__ = ["GraphFormatError", "zero_matrix", "load_matrix", "save_matrix", "matrix_to_list"]

Matrix = list[list[int]]


class GraphFormatError(ValueError):
    """Raised when a matrix file does not hold a well-formed square matrix."""


def zero_matrix(n: int) -> Matrix:
    """Return an ``n`` by ``n`` matrix of zeros with independent rows."""
    if n < 0:
        raise ValueError("matrix size must not be negative")
    return [[0] * n for _ in range(n)]


def load_matrix(path: str | Path) -> Matrix:
    """Read a square matrix whose first number is its size ``n``.

    The remaining ``n * n`` whitespace-separated integers are the cells in
    row-major order; anything after them is ignored.
    """
    with open(path, encoding="ascii") as file:
        tokens = file.read().split()
    if not tokens:
        raise GraphFormatError(f"Bad format in {path}")
    try:
        n = int(tokens[0])
    except ValueError:
        raise GraphFormatError(f"Bad format in {path}") from None
    if n < 0:
        raise GraphFormatError(f"Bad format in {path}")

    values: list[int] = []
    for index, token in enumerate(tokens[1 : 1 + n * n]):
        try:
            values.append(int(token))
        except ValueError:
            row, col = divmod(index, n)
            raise GraphFormatError(f"Bad data in {path} at {row},{col}") from None
    if len(values) < n * n:
        row, col = divmod(len(values), n)
        raise GraphFormatError(f"Bad data in {path} at {row},{col}")
    return [values[i * n : (i + 1) * n] for i in range(n)]


def save_matrix(path: str | Path, matrix: Sequence[Sequence[int]]) -> None:
    """Write ``matrix`` with its size on the first line and one row per line."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    with open(path, "w", encoding="ascii") as file:
        file.write(f"{n}\n")
        file.writelines(" ".join(str(cell) for cell in row) + "\n" for row in matrix)


def matrix_to_list(
    matrix: Sequence[Sequence[int]], weighted: bool = False
) -> list[list[int]] | list[list[tuple[int, int]]]:
    """Turn an adjacency matrix into adjacency lists.

    Each vertex's neighbours are listed from the highest index down. Without
    ``weighted`` the lists hold neighbour indices; with it they hold
    ``(neighbour, weight)`` pairs. A zero cell means no edge.
    """
    if weighted:
        return [
            [(v, w) for v, w in reversed(list(enumerate(row))) if w]
            for row in matrix
        ]
    return [[v for v in range(len(row) - 1, -1, -1) if row[v]] for row in matrix]
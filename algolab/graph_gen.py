"""Generate random connected DAGs and weighted undirected graphs as matrix files."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from algolab.graph_io import Matrix, save_matrix, zero_matrix

__all__ = ["generate_connected_dag", "generate_mst_graph", "main"]

_MAX_WEIGHT = 1000


def _check(n: int, fraction: float, what: str) -> int:
    if n < 1:
        raise ValueError("graph must have at least one vertex")
    if fraction > 1:
        raise ValueError(f"{what} must not exceed 1")
    return math.ceil(fraction * (n * (n - 1) // 2))


def generate_connected_dag(
    n: int, saturation: float = 0.6, rng: random.Random | None = None
) -> Matrix:
    """Return the adjacency matrix of a random connected DAG on ``n`` vertices.

    A random vertex order is chained edge by edge so the graph is connected,
    then further forward edges are added at random until the edge count
    reaches ``ceil(saturation * n * (n - 1) / 2)``.
    """
    target = _check(n, saturation, "saturation")
    generator = rng if rng is not None else random.Random()
    matrix = zero_matrix(n)

    order = list(range(n))
    generator.shuffle(order)
    for a, b in zip(order, order[1:]):
        matrix[a][b] = 1
    count = n - 1

    if count < target:
        free = [
            (order[i], order[j])
            for i in range(n)
            for j in range(i + 2, n)
        ]
        for u, v in generator.sample(free, target - count):
            matrix[u][v] = 1
    return matrix


def generate_mst_graph(
    n: int, density: float, rng: random.Random | None = None
) -> Matrix:
    """Return a symmetric weight matrix of a connected undirected graph.

    Vertices ``i`` and ``i + 1`` are always joined, then random edges are
    added until the edge count reaches ``ceil(density * n * (n - 1) / 2)``.
    Weights are drawn from 1 to 1000; a zero cell means no edge.
    """
    target = _check(n, density, "density")
    generator = rng if rng is not None else random.Random()
    weight = zero_matrix(n)

    for i in range(n - 1):
        w = generator.randint(1, _MAX_WEIGHT)
        weight[i][i + 1] = weight[i + 1][i] = w
    count = n - 1

    if count < target:
        free = [(u, v) for u in range(n) for v in range(u + 2, n)]
        for u, v in generator.sample(free, target - count):
            w = generator.randint(1, _MAX_WEIGHT)
            weight[u][v] = weight[v][u] = w
    return weight


def main(argv: Sequence[str] | None = None) -> int:
    """Write the DAG and MST dataset files."""
    parser = argparse.ArgumentParser(description="Generate graph datasets.")
    parser.add_argument("kind", nargs="?", choices=("dag", "mst", "all"), default="all")
    parser.add_argument("--dataset-dir", default="dataset")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--dag-start", type=int, default=100)
    parser.add_argument("--dag-stop", type=int, default=1500)
    parser.add_argument("--dag-step", type=int, default=100)
    parser.add_argument("--saturation", type=float, default=0.6)
    parser.add_argument("--mst-start", type=int, default=100)
    parser.add_argument("--mst-stop", type=int, default=1000)
    parser.add_argument("--mst-step", type=int, default=50)
    parser.add_argument("--densities", type=int, nargs="+", default=[30, 70])
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    out_dir = Path(args.dataset_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        if args.kind in ("dag", "all"):
            for n in range(args.dag_start, args.dag_stop + 1, args.dag_step):
                matrix = generate_connected_dag(n, args.saturation, rng)
                save_matrix(out_dir / f"dag_{n}.txt", matrix)
        if args.kind in ("mst", "all"):
            for n in range(args.mst_start, args.mst_stop + 1, args.mst_step):
                for d in args.densities:
                    weight = generate_mst_graph(n, d / 100.0, rng)
                    save_matrix(out_dir / f"mst_{d}_{n}.txt", weight)
    except (OSError, ValueError) as exc:
        print(f"graph_gen: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
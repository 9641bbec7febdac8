"""Random DAGs at a chosen edge saturation, stored as bare adjacency matrices."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from algolab.graph_io import GraphFormatError, Matrix, zero_matrix

__all__ = [
    "Dag",
    "create_dag",
    "generate_dag",
    "save_dag",
    "load_dag",
    "count_edges",
    "benchmark_file",
    "main",
]


@dataclass
class Dag:
    """A directed graph held as a square 0/1 adjacency matrix."""

    adj_matrix: Matrix = field(default_factory=list)

    def __post_init__(self) -> None:
        n = len(self.adj_matrix)
        if any(len(row) != n for row in self.adj_matrix):
            raise ValueError("adjacency matrix must be square")

    @classmethod
    def empty(cls, num_nodes: int) -> Dag:
        """A graph of ``num_nodes`` vertices and no edges."""
        return cls(zero_matrix(num_nodes))

    @property
    def num_nodes(self) -> int:
        return len(self.adj_matrix)


def _possible_edges(n: int) -> int:
    return n * (n - 1) // 2


def create_dag(
    num_nodes: int, saturation: float, rng: random.Random | None = None
) -> Dag:
    """Build a connected DAG whose expected edge count follows ``saturation``.

    A random vertex order gets a random spanning tree whose edges point
    forward in that order; every other forward pair then gains an edge with
    the probability needed to reach ``int(saturation * n * (n - 1) / 2)``
    edges on average. Raises ValueError for fewer than one vertex or for a
    saturation too low to keep the graph connected.
    """
    if num_nodes < 1:
        raise ValueError("graph must have at least one vertex")
    total_possible = _possible_edges(num_nodes)
    if total_possible:
        min_sat = (num_nodes - 1) / total_possible
        if saturation < min_sat:
            raise ValueError(
                f"Saturation must be at least {min_sat:.4f} for connectivity"
            )

    generator = rng if rng is not None else random.Random()
    dag = Dag.empty(num_nodes)
    matrix = dag.adj_matrix

    order = list(range(num_nodes))
    generator.shuffle(order)

    for i in range(1, num_nodes):
        parent = generator.randrange(i)
        matrix[order[parent]][order[i]] = 1

    tree_edges = num_nodes - 1
    remaining = total_possible - tree_edges
    if remaining <= 0:
        return dag
    target = int(saturation * total_possible)
    p = (target - tree_edges) / remaining

    for i in range(num_nodes):
        for j in range(i + 1, num_nodes):
            u, v = order[i], order[j]
            if not matrix[u][v] and generator.random() <= p:
                matrix[u][v] = 1
    return dag


def generate_dag(
    nodes: int, saturation: float, rng: random.Random | None = None
) -> Dag:
    """Build a DAG with exactly ``int(saturation * n * (n - 1) / 2)`` edges.

    The edges are chosen uniformly among the forward pairs of a random
    vertex order by selection sampling; connectivity is not enforced.
    """
    if nodes < 1:
        raise ValueError("graph must have at least one vertex")
    generator = rng if rng is not None else random.Random()
    dag = Dag.empty(nodes)
    matrix = dag.adj_matrix

    order = list(range(nodes))
    generator.shuffle(order)

    pool = _possible_edges(nodes)
    target = max(0, min(int(saturation * pool), pool))
    for i in range(nodes):
        for j in range(i + 1, nodes):
            if generator.randrange(pool) < target:
                matrix[order[i]][order[j]] = 1
                target -= 1
            pool -= 1
    return dag


def save_dag(dag: Dag, path: str | Path) -> None:
    """Write the matrix row by row, each cell followed by a space."""
    with open(path, "w", encoding="ascii") as file:
        file.writelines(
            "".join(f"{cell} " for cell in row) + "\n" for row in dag.adj_matrix
        )


def load_dag(path: str | Path) -> Dag:
    """Read a matrix written by :func:`save_dag`.

    The size is the number of values on the first line. Raises
    GraphFormatError when the file holds too few or non-integer values.
    """
    with open(path, encoding="ascii") as file:
        text = file.read()
    lines = text.splitlines()
    nodes = len(lines[0].split()) if lines else 0
    if nodes == 0:
        raise GraphFormatError(f"Bad format in {path}")

    tokens = text.split()[: nodes * nodes]
    values: list[int] = []
    for index, token in enumerate(tokens):
        try:
            values.append(int(token))
        except ValueError:
            row, col = divmod(index, nodes)
            raise GraphFormatError(f"Bad data in {path} at {row},{col}") from None
    if len(values) < nodes * nodes:
        row, col = divmod(len(values), nodes)
        raise GraphFormatError(f"Bad data in {path} at {row},{col}")
    return Dag([values[i * nodes : (i + 1) * nodes] for i in range(nodes)])


def count_edges(dag: Dag) -> int:
    """Number of non-zero cells in the adjacency matrix."""
    return sum(1 for row in dag.adj_matrix for cell in row if cell)


def benchmark_file(
    path: str | Path, results_path: str | Path = "benchmark/results.csv"
) -> tuple[int, int, float, float]:
    """Time loading ``path`` and counting its edges; append a CSV line.

    The appended line is ``path,nodes,load_seconds,count_seconds``. Returns
    the node count, the edge count and the two CPU times in seconds.
    """
    start = time.process_time()
    dag = load_dag(path)
    load_time = time.process_time() - start

    start = time.process_time()
    edges = count_edges(dag)
    count_time = time.process_time() - start

    with open(results_path, "a", encoding="utf-8") as results:
        results.write(f"{path},{dag.num_nodes},{load_time:.6f},{count_time:.6f}\n")
    return dag.num_nodes, edges, load_time, count_time


def _run_generate(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    build = create_dag if args.connected else generate_dag
    out_dir = Path(args.dataset_dir)
    try:
        dag = build(args.nodes, args.saturation, rng)
        out_dir.mkdir(parents=True, exist_ok=True)
        save_dag(dag, out_dir / f"{args.filename}.txt")
    except (OSError, ValueError) as exc:
        print(f"gen_graph: {exc}", file=sys.stderr)
        return 1
    return 0


def _run_bench(args: argparse.Namespace) -> int:
    try:
        benchmark_file(args.input_file, args.results)
    except (OSError, GraphFormatError) as exc:
        print(f"benchmark: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a saturated DAG file or benchmark loading one."""
    parser = argparse.ArgumentParser(description="Saturated DAG generator and benchmark.")
    commands = parser.add_subparsers(dest="command", required=True)

    gen = commands.add_parser("generate", help="write a random DAG to <dir>/<filename>.txt")
    gen.add_argument("nodes", type=int)
    gen.add_argument("saturation", type=float)
    gen.add_argument("filename")
    gen.add_argument("--dataset-dir", default="dataset")
    gen.add_argument("--connected", action="store_true")
    gen.add_argument("--seed", type=int, default=None)
    gen.set_defaults(run=_run_generate)

    bench = commands.add_parser("bench", help="time loading a DAG file")
    bench.add_argument("input_file")
    bench.add_argument("--results", default="benchmark/results.csv")
    bench.set_defaults(run=_run_bench)

    args = parser.parse_args(argv)
    return args.run(args)


if __name__ == "__main__":
    raise SystemExit(main())
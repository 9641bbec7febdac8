"""Write files of random integers for the sorting benchmarks."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from pathlib import Path

from algolab.sorting import generate_random_array

__all__ = ["generate_dataset", "generate_datasets", "main"]


def generate_dataset(
    path: str | Path, n: int, low: int, high: int, rng: random.Random | None = None
) -> None:
    """Write ``n`` random integers from ``[low, high]`` to ``path``, one per line."""
    numbers = generate_random_array(n, low, high, rng)
    with open(path, "w", encoding="ascii") as file:
        file.writelines(f"{value}\n" for value in numbers)


def generate_datasets(
    folder: str | Path,
    prefix: str,
    base_amount: int,
    offset: int,
    count: int,
    low: int,
    high: int,
    rng: random.Random | None = None,
) -> list[Path]:
    """Write ``count`` datasets named ``<prefix><size>``, growing by ``offset``."""
    paths = []
    for i in range(count):
        amount = base_amount + i * offset
        path = Path(folder) / f"{prefix}{amount}"
        generate_dataset(path, amount, low, high, rng)
        paths.append(path)
    return paths


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the series of random datasets."""
    parser = argparse.ArgumentParser(description="Generate random integer datasets.")
    parser.add_argument("--folder", default="../dataset/random")
    parser.add_argument("--prefix", default="s")
    parser.add_argument("--base-amount", type=int, default=2000)
    parser.add_argument("--offset", type=int, default=4000)
    parser.add_argument("--count", type=int, default=15)
    parser.add_argument("--min", dest="low", type=int, default=10)
    parser.add_argument("--max", dest="high", type=int, default=10000)
    args = parser.parse_args(argv)

    rng = random.Random()
    for i in range(args.count):
        amount = args.base_amount + i * args.offset
        path = Path(args.folder) / f"{args.prefix}{amount}"
        print(f"Generating dataset: {path}")
        try:
            generate_dataset(path, amount, args.low, args.high, rng)
        except OSError as exc:
            print(f"Error opening file: {exc}")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
# algolab

A small laboratory of classic algorithms and data structures, together with
tools that generate datasets and time the algorithms on them.

It covers three areas:

- **Sorting** (`algolab.sorting`): bubble, insertion, selection, heap and
  merge sort, and three quicksort variants that differ in pivot choice
  (middle element, rightmost element, random element). Every sort works in
  place and also returns the sequence it was given.
- **Search trees**: an unbalanced binary search tree that can be rebuilt
  into a balanced one (`algolab.bst.BinarySearchTree`) and a self-balancing
  AVL tree (`algolab.avl.AVLTree`).
- **Graphs**: adjacency-matrix file I/O (`algolab.graph_io`), topological
  sorting by depth-first search and by Kahn's algorithm (`algolab.toposort`),
  Prim's minimum spanning tree over a matrix or an adjacency list
  (`algolab.mst`), random graph generators (`algolab.graph_gen`,
  `algolab.saturated_dag`) and a timing benchmark (`algolab.graph_bench`).

No third-party libraries are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

### Sorting

```python
import random
from algolab.sorting import heap_sort, quick_sort_random, is_sorted

nums = [5, 2, 1755, 1, 5, 6855, 0, 3, 8, 7]
heap_sort(nums)

other = [10, 9, 8, 7, 6, 5, 4, 3, 2, 1]
quick_sort_random(other, random.Random(42))
print(is_sorted(nums), is_sorted(other))
```

`generate_random_array(amount, low, high, rng)` produces test data from an
inclusive range, and `format_array` renders a sequence as `Nums: {a, b, }`.

### Trees

```python
from algolab.bst import BinarySearchTree
from algolab.avl import AVLTree

tree = BinarySearchTree()
for value in [1, 2, 3, 4, 5, 6, 7]:
    tree.insert(value)
print(tree.height())   # 6: a degenerate chain
tree.balance()
print(tree.height())   # 2 after balancing
print(4 in tree, list(tree))

avl = AVLTree([1, 2, 3, 4, 5, 6, 7])
print(avl.height(), len(avl))   # 3 7
```

`BinarySearchTree.height()` counts edges (−1 when empty);
`AVLTree.height()` counts nodes (0 when empty). The AVL tree ignores
duplicate values and its `insert` returns `False` for them; the plain binary
search tree keeps duplicates. Both iterate in ascending order and support
`in`, `len` and `clear()`.

### Graphs

Graph files written by `algolab.graph_io.save_matrix` hold the number of
vertices `n` on the first line, followed by `n` rows of `n`
space-separated integers. A non-zero entry is an edge; in weighted graphs it
is the edge weight. `load_matrix` raises `GraphFormatError` for a malformed
file.

```python
from algolab.graph_io import load_matrix, matrix_to_list
from algolab.toposort import topological_sort_matrix, topological_sort_list
from algolab.mst import prim_mst_matrix

dag = load_matrix("dataset/dag_100.txt")
order = topological_sort_matrix(dag)
same_graph = topological_sort_list(matrix_to_list(dag))

weights = load_matrix("dataset/mst_30_100.txt")
total = prim_mst_matrix(weights)
```

The Kahn-based sorts raise `ValueError` when the graph has a cycle, and the
Prim functions raise `ValueError` when the graph is not connected.

`algolab.graph_gen.generate_connected_dag` and `generate_mst_graph` build
connected random graphs with an exact edge count. `algolab.saturated_dag`
builds DAGs at a chosen saturation (`create_dag`, `generate_dag`) and stores
them as bare matrices without a size line (`save_dag`, `load_dag`).

## Command-line tools

Each tool reads and writes files relative to the current directory; run any
of them with `--help` for its options.

| Command | What it does |
| --- | --- |
| `algolab-sorting-datasets` | Writes files `<prefix><size>` of random integers (defaults: 15 files into `../dataset/random`, sizes 2000, 6000, …). |
| `algolab-sorting-bench check` | Runs a sorting algorithm on fixed cases and reports pass or fail for each. |
| `algolab-sorting-bench time PATH` | Times a sorting algorithm on a file of integers and shows the first 100 sorted values. |
| `algolab-graph-gen` | Writes `dag_<n>.txt` and `mst_<d>_<n>.txt` into `dataset/`. |
| `algolab-graph-bench` | Times both topological sorts and both Prim variants, writing `toposort.csv` and `mst_<d>.csv` into `results/`. |
| `algolab-saturated-dag generate N SATURATION NAME` | Writes a random DAG to `dataset/NAME.txt`; `--connected` guarantees connectivity. |
| `algolab-saturated-dag bench FILE` | Times loading a DAG file and counting its edges, appending a line to `benchmark/results.csv`. |

A typical graph session:

```
algolab-graph-gen
algolab-graph-bench
```

The benchmark CSV files have the columns `n,time_matrix_ms,time_list_ms`,
with times averaged over repeated runs.

## What is not included

The package has no sorted linked list, and no command that generates
datasets for the search trees or times insertion, search and deletion in
them; the trees are available only as library classes.
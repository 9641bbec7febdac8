[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic sorting algorithms, search trees and graph algorithms with dataset generators and timing benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "binary search tree",
    "avl tree",
    "topological sort",
    "minimum spanning tree",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-sorting-datasets = "algolab.sorting_datasets:main"
algolab-sorting-bench = "algolab.sorting_bench:main"
algolab-graph-gen = "algolab.graph_gen:main"
algolab-graph-bench = "algolab.graph_bench:main"
algolab-saturated-dag = "algolab.saturated_dag:main"

[tool.setuptools.packages.find]
include = ["algolab*"]

[tool.pytest.ini_options]
addopts = "-ra"

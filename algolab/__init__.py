"""Sorting algorithms, search trees and graph algorithms with dataset generators and benchmarks."""

__version__ = "0.1.0"
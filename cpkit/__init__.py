"""Algorithms and data structures for competitive programming: number theory, range-query trees, LCA, graphs and debug printing."""

__version__ = "0.1.0"
"""Readable implementations of classic graph, tree, heap and sorting algorithms, with small dispatch helpers."""

__version__ = "0.1.0"
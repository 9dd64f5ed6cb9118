"""Sorting algorithms, a ring-buffer deque, graph search and small networking demos."""

__version__ = "0.1.0"
"""Keyed-item protocols, a heap, a queue, a stack and a binary search tree."""

__version__ = "0.1.0"
__all__ = ["element", "heap", "queue", "stack", "binary_tree"]
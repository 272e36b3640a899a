"""Classic data structures and algorithms: trees, heaps, stacks, hash tables and graphs."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "binary_tree",
    "bst",
    "dijkstra",
    "graph",
    "hashing",
    "heap",
    "intersection",
    "levels",
    "stack",
    "stack_lists",
]
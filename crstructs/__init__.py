"""Classic data structures: linked list, stack, queues, hash multimap and binary search tree."""

__version__ = "0.1.0"

__all__ = [
    "bstree",
    "demo",
    "fifo",
    "hashmap",
    "pqueue",
    "slist",
    "stack",
    "treenode",
    "utils",
]
"""Classic data structures and algorithms: stacks, queues, lists, trees, heaps,
graphs, sorting, searching and hashing."""

__version__ = "0.1.0"
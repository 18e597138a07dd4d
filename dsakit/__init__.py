"""Classic data structures: linked lists, stack, queue and a chaining hash table."""

__version__ = "0.1.0"
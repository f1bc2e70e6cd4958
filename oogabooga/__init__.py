"""Game code building blocks: vectors, matrices, a hash table, input state, simulated allocators and logging."""

__version__ = "0.1.8"
__all__ = ["vectors", "matrices", "hash_table", "input", "memory", "log"]
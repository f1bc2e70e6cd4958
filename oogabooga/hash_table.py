"""A small table keyed by hash, with entries kept in insertion order.

Entries hold only the hash of their key and the value; two keys with the
same hash are treated as the same key by ``find``, ``contains`` and ``set``.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterator, List, Optional, Tuple

_DEFAULT_CAPACITY = 128
_MAX_INITIAL_CAPACITY = 8


def _next_power_of_two(value: int) -> int:
    """The smallest power of two that is at least ``value`` (1 for 0)."""
    if value <= 1:
        return 1
    return 1 << (value - 1).bit_length()


class HashTable:
    """A linear-scan table of ``(hash, value)`` entries.

    ``key_type`` and ``value_type``, when given, are checked on every insert,
    much like a table created for fixed key and value types.
    """

    def __init__(
        self,
        key_type: Optional[type] = None,
        value_type: Optional[type] = None,
        capacity: int = _DEFAULT_CAPACITY,
        hash_function: Callable[[Hashable], int] = hash,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.key_type = key_type
        self.value_type = value_type
        self._hash = hash_function
        self._entries: List[Tuple[int, Any]] = []
        self.capacity_count = min(capacity, _MAX_INITIAL_CAPACITY)

    @property
    def count(self) -> int:
        """Number of valid entries."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in insertion order."""
        return (value for _, value in self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)

    def __getitem__(self, key: Hashable) -> Any:
        index = self._index_of(self._hash(key))
        if index is None:
            raise KeyError(key)
        return self._entries[index][1]

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.set(key, value)

    def _check_types(self, key: Any, value: Any) -> None:
        if self.key_type is not None and not isinstance(key, self.key_type):
            raise TypeError(
                f"key type {type(key).__name__} does not match table key type "
                f"{self.key_type.__name__}"
            )
        if self.value_type is not None and not isinstance(value, self.value_type):
            raise TypeError(
                f"value type {type(value).__name__} does not match table value type "
                f"{self.value_type.__name__}"
            )

    def _index_of(self, key_hash: int) -> Optional[int]:
        return next(
            (i for i, (h, _) in enumerate(self._entries) if h == key_hash), None
        )

    def reserve(self, required_count: int) -> None:
        """Make room for at least ``required_count`` entries."""
        if self.capacity_count >= required_count:
            return
        self.capacity_count = _next_power_of_two(required_count)

    def add(self, key: Hashable, value: Any) -> None:
        """Append an entry; this may add several entries with the same hash."""
        self._check_types(key, value)
        self.reserve(self.count + 1)
        self._entries.append((self._hash(key), value))

    def find(self, key: Hashable) -> Optional[Any]:
        """The value of the first entry whose hash matches ``key``, or None."""
        index = self._index_of(self._hash(key))
        return None if index is None else self._entries[index][1]

    def contains(self, key: Hashable) -> bool:
        return self._index_of(self._hash(key)) is not None

    def set(self, key: Hashable, value: Any) -> bool:
        """Store ``value`` under ``key``; True if the key was newly added."""
        index = self._index_of(self._hash(key))
        if index is None:
            self.add(key, value)
            return True
        self._check_types(key, value)
        self._entries[index] = (self._entries[index][0], value)
        return False

    def get_nth_value(self, n: int) -> Any:
        """The value of the ``n``-th entry in insertion order."""
        if not 0 <= n < self.count:
            raise IndexError("hash table n is out of range")
        return self._entries[n][1]

    def reset(self) -> None:
        """Drop all entries but keep the reserved capacity."""
        self._entries.clear()

    def destroy(self) -> None:
        """Drop all entries and the reserved capacity."""
        self._entries.clear()
        self.capacity_count = 0
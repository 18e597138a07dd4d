"""Hash table using separate chaining with doubly linked lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Optional, TypeVar

from .doubly_linked_list import DoublyLinkedList
from .hashing import hash_key

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(eq=False)
class HashEntry(Generic[K, V]):
    """A key-value pair; entries compare equal when their keys do."""

    key: K
    value: V

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashEntry):
            return NotImplemented
        return self.key == other.key

    __hash__ = None  # type: ignore[assignment]


class HashTableChaining(Generic[K, V]):
    """A fixed-capacity hash table whose buckets are linked lists."""

    def __init__(self, initial_capacity: int = 16) -> None:
        if initial_capacity < 1:
            raise ValueError("Capacity must be at least 1.")
        self._buckets: list[DoublyLinkedList[HashEntry[K, V]]] = [
            DoublyLinkedList() for _ in range(initial_capacity)
        ]
        self._count = 0

    def _bucket(self, key: K) -> DoublyLinkedList[HashEntry[K, V]]:
        return self._buckets[hash_key(key) % len(self._buckets)]

    def _entry(self, key: K) -> Optional[HashEntry[K, V]]:
        return next((entry for entry in self._bucket(key) if entry.key == key), None)

    def insert(self, key: K, value: V) -> None:
        """Set the value for ``key``, adding the key if it is new."""
        entry = self._entry(key)
        if entry is not None:
            entry.value = value
        else:
            self._bucket(key).append(HashEntry(key, value))
            self._count += 1

    def remove(self, key: K) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket(key)
        target = HashEntry(key, None)
        if target not in bucket:
            return False
        bucket.remove(target)
        self._count -= 1
        return True

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key``, or None when it is absent."""
        entry = self._entry(key)
        return None if entry is None else entry.value

    def contains_key(self, key: K) -> bool:
        return self._entry(key) is not None

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0
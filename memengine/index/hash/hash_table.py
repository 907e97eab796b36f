from dataclasses import dataclass
from typing import Any, Hashable, Iterator, List, Optional, Tuple

from ...config import DEFAULT_CONFIG
from ...core.exceptions import InvalidArgumentError
from ...core.interfaces import IndexStore
from ...utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class HashEntry:
    """A key/value pair living in a bucket chain."""
    key: Hashable
    value: Any


class HashTable(IndexStore):
    """
    🗃️ Hash table with separate chaining 🗃️

    Every bucket holds a chain of entries whose keys hash to the same index.
    When the load factor passes 0.75 the bucket array doubles and every entry
    is rehashed into the new array (full rebuild, not incremental).

    Bucket Layout (capacity 8):
    ┌───┬──────────────────────────────┐
    │ 0 │ ∅                            │
    │ 1 │ (k1,v1) → (k9,v9)            │  ← collision chain
    │ 2 │ (k2,v2)                      │
    │ … │                              │
    │ 7 │ ∅                            │
    └───┴──────────────────────────────┘

    ⏱️ Average O(1) for put/get/remove, O(n) when every key collides.
    """

    DEFAULT_CAPACITY = DEFAULT_CONFIG.hash_table_capacity
    LOAD_FACTOR = DEFAULT_CONFIG.hash_table_load_factor

    def __init__(self, capacity: int = DEFAULT_CAPACITY, load_factor: float = LOAD_FACTOR):
        if capacity <= 0:
            raise InvalidArgumentError(f"Capacity must be positive, got {capacity}")
        if load_factor <= 0:
            raise InvalidArgumentError(f"Load factor must be positive, got {load_factor}")

        self._capacity = capacity
        self._load_factor = load_factor
        self._buckets: List[List[HashEntry]] = [[] for _ in range(capacity)]
        self._size = 0

    def _hash(self, key: Hashable) -> int:
        return abs(hash(key)) % self._capacity

    def _bucket(self, key: Hashable) -> List[HashEntry]:
        return self._buckets[self._hash(key)]

    def _find_entry(self, key: Hashable) -> Optional[HashEntry]:
        for entry in self._bucket(key):
            if entry.key == key:
                return entry
        return None

    def put(self, key: Hashable, value: Any) -> None:
        """
        ➕ Insert or overwrite a key/value pair ➕

        Scans the target chain first so an existing key is updated in place.
        A new key is appended to the chain, then the load factor is checked.

        Raises:
            InvalidArgumentError: If key is None
        """
        if key is None:
            raise InvalidArgumentError("Key cannot be None")

        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                entry.value = value
                return

        bucket.append(HashEntry(key, value))
        self._size += 1

        if self._size / self._capacity > self._load_factor:
            self._resize()

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the value stored for key, or None."""
        if key is None:
            return None
        entry = self._find_entry(key)
        return entry.value if entry is not None else None

    def remove(self, key: Hashable) -> Optional[Any]:
        """Remove key and return its value, or None if it was not present."""
        if key is None:
            return None

        bucket = self._bucket(key)
        for i, entry in enumerate(bucket):
            if entry.key == key:
                bucket.pop(i)
                self._size -= 1
                return entry.value
        return None

    def contains_key(self, key: Hashable) -> bool:
        if key is None:
            return False
        return self._find_entry(key) is not None

    def _resize(self) -> None:
        """
        🔄 Double the bucket array and rehash every entry 🔄

        Entries keep their objects; only their bucket index changes.
        """
        old_buckets = self._buckets
        self._capacity *= 2
        self._buckets = [[] for _ in range(self._capacity)]

        for bucket in old_buckets:
            for entry in bucket:
                self._buckets[self._hash(entry.key)].append(entry)

        logger.debug("HashTable resized to capacity %d (size=%d)",
                     self._capacity, self._size)

    def keys(self) -> List[Hashable]:
        return [entry.key for bucket in self._buckets for entry in bucket]

    def values(self) -> List[Any]:
        return [entry.value for bucket in self._buckets for entry in bucket]

    def items(self) -> List[Tuple[Hashable, Any]]:
        return [(entry.key, entry.value) for bucket in self._buckets for entry in bucket]

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        """Drop every entry; the current capacity is kept."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._size / self._capacity

    def get_average_chain_length(self) -> float:
        """Average length of the non-empty chains; 0.0 for an empty table."""
        chains = [len(bucket) for bucket in self._buckets if bucket]
        return sum(chains) / len(chains) if chains else 0.0

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return (f"HashTable(size={self._size}, capacity={self._capacity}, "
                f"avg_chain={self.get_average_chain_length():.2f})")

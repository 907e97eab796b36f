from dataclasses import dataclass
from typing import Any, Hashable, List, Optional, Tuple

from ...config import DEFAULT_CONFIG
from ...core.exceptions import InvalidArgumentError
from ...core.interfaces import IndexStore
from ...utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ProbeStats:
    """
    Probe counters owned by whoever owns the table.

    Several tables may share one instance when the owner wants a combined
    figure.
    """
    collisions: int = 0
    resizes: int = 0

    def reset(self) -> None:
        self.collisions = 0
        self.resizes = 0


@dataclass
class ProbeSlot:
    key: Hashable
    value: Any
    is_deleted: bool = False


class LinearProbingHash(IndexStore):
    """
    🔎 Open-addressing hash table with linear probing 🔎

    Each slot is in one of three states:
    ┌────────────┬──────────────────────────────────────────────┐
    │ EMPTY      │ None: ends every probe sequence              │
    │ OCCUPIED   │ live ProbeSlot                               │
    │ TOMBSTONE  │ ProbeSlot with is_deleted=True: probes walk  │
    │            │ past it, put may reuse it                    │
    └────────────┴──────────────────────────────────────────────┘

    Probe sequence for a key hashing to slot 3:

        3 → 4 → 5 → … → capacity-1 → 0 → 1 → 2 → (back at 3: table full)

    Tombstones stay until the next resize, which re-inserts live entries only.
    The capacity starts at a prime (101) and is doubled on resize, so later
    capacities are not prime.
    """

    DEFAULT_CAPACITY = DEFAULT_CONFIG.probing_capacity
    LOAD_FACTOR = DEFAULT_CONFIG.probing_load_factor

    def __init__(self, capacity: int = DEFAULT_CAPACITY, load_factor: float = LOAD_FACTOR,
                 stats: Optional[ProbeStats] = None):
        if capacity <= 0:
            raise InvalidArgumentError(f"Capacity must be positive, got {capacity}")
        if not 0 < load_factor < 1:
            raise InvalidArgumentError(
                f"Load factor must be in (0, 1), got {load_factor}")

        self._capacity = capacity
        self._load_factor = load_factor
        self._table: List[Optional[ProbeSlot]] = [None] * capacity
        self._size = 0
        self.stats = stats if stats is not None else ProbeStats()
        self._collisions = 0  # this table's share of stats.collisions

    def _hash(self, key: Hashable) -> int:
        return abs(hash(key)) % self._capacity

    def _find_index(self, key: Hashable) -> Optional[int]:
        """Index of the live slot holding key, or None."""
        index = self._hash(key)
        home = index

        while self._table[index] is not None:
            slot = self._table[index]
            if not slot.is_deleted and slot.key == key:
                return index

            index = (index + 1) % self._capacity
            if index == home:
                break

        return None

    def put(self, key: Hashable, value: Any) -> None:
        """
        ➕ Insert or overwrite a key/value pair ➕

        Probing runs until the key or an empty slot is found. The first
        tombstone passed on the way is where a new key lands, so the key is
        only ever stored once. Wrapping all the way round without finding an
        empty slot forces a resize and a retry.

        Raises:
            InvalidArgumentError: If key is None
        """
        if key is None:
            raise InvalidArgumentError("Key cannot be None")

        index = self._hash(key)
        home = index
        probe_count = 0
        first_tombstone: Optional[int] = None

        while self._table[index] is not None:
            slot = self._table[index]
            if slot.is_deleted:
                if first_tombstone is None:
                    first_tombstone = index
            elif slot.key == key:
                slot.value = value
                return

            index = (index + 1) % self._capacity
            probe_count += 1

            if index == home:
                if first_tombstone is None:
                    self._resize()
                    self.put(key, value)
                    return
                break

        if first_tombstone is not None:
            index = first_tombstone
            # probe length up to the reused slot
            probe_count = (first_tombstone - home) % self._capacity

        if probe_count > 0:
            self._collisions += 1
            self.stats.collisions += 1

        self._table[index] = ProbeSlot(key, value)
        self._size += 1

        if self._size / self._capacity > self._load_factor:
            self._resize()

    def get(self, key: Hashable) -> Optional[Any]:
        if key is None:
            return None
        index = self._find_index(key)
        return self._table[index].value if index is not None else None

    def remove(self, key: Hashable) -> Optional[Any]:
        """Mark key's slot as a tombstone and return its value, or None."""
        if key is None:
            return None

        index = self._find_index(key)
        if index is None:
            return None

        slot = self._table[index]
        slot.is_deleted = True
        self._size -= 1
        return slot.value

    def contains_key(self, key: Hashable) -> bool:
        if key is None:
            return False
        return self._find_index(key) is not None

    def _resize(self) -> None:
        """
        🔄 Double the capacity and re-insert live entries 🔄

        Tombstones are dropped and this table's collisions start over, since
        they describe probe sequences of the old layout. Collisions other
        tables recorded in a shared ProbeStats are left alone.
        """
        old_table = self._table
        self._capacity *= 2
        self._table = [None] * self._capacity
        self._size = 0
        self._forget_collisions()
        self.stats.resizes += 1

        for slot in old_table:
            if slot is not None and not slot.is_deleted:
                self.put(slot.key, slot.value)

        logger.debug("LinearProbingHash resized to capacity %d (size=%d)",
                     self._capacity, self._size)

    def keys(self) -> List[Hashable]:
        return [slot.key for slot in self._table if slot is not None and not slot.is_deleted]

    def items(self) -> List[Tuple[Hashable, Any]]:
        return [(slot.key, slot.value) for slot in self._table
                if slot is not None and not slot.is_deleted]

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._table = [None] * self._capacity
        self._size = 0
        self._forget_collisions()

    def _forget_collisions(self) -> None:
        """Take this table's collisions back out of the (possibly shared) stats."""
        # the owner may have reset stats in the meantime
        self.stats.collisions = max(0, self.stats.collisions - self._collisions)
        self._collisions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def tombstone_count(self) -> int:
        return sum(1 for slot in self._table if slot is not None and slot.is_deleted)

    def get_collision_count(self) -> int:
        """Collisions recorded by this table since its last resize or clear."""
        return self._collisions

    def get_load_factor(self) -> float:
        return self._size / self._capacity

    def __repr__(self) -> str:
        return (f"LinearProbingHash(size={self._size}, capacity={self._capacity}, "
                f"load={self.get_load_factor():.2f}, collisions={self._collisions})")

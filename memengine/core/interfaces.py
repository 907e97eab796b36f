"""
Contracts shared by the engine's structures.

The orchestrator that owns the structures talks to them through these
interfaces only; structures never call each other.

CONTRACT HIERARCHY:
┌──────────────┐   ┌──────────────────┐   ┌──────────────────┐
│  IndexStore  │   │ OrderedContainer │   │ NavigableHistory │
└──────────────┘   └──────────────────┘   └──────────────────┘
       │                    │                      │
 HashTable            MinHeap                DoubleLinkedList
 LinearProbingHash    Queue                  XORLinkedList
 BPlusTree            Stack
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional


class IndexStore(ABC):
    """Abstract base class for key/value indexes."""

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """Insert or overwrite the value stored under key."""
        pass

    @abstractmethod
    def get(self, key: Hashable) -> Optional[Any]:
        """Return the value for key, or None if absent."""
        pass

    @abstractmethod
    def remove(self, key: Hashable) -> Optional[Any]:
        """Remove key and return its value, or None if absent."""
        pass

    @abstractmethod
    def contains_key(self, key: Hashable) -> bool:
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Hashable) -> bool:
        return self.contains_key(key)


class OrderedContainer(ABC):
    """
    Abstract base class for containers that hand items back in a fixed
    discipline (priority, FIFO or LIFO).
    """

    @abstractmethod
    def insert(self, item: Any) -> None:
        pass

    @abstractmethod
    def remove_next(self) -> Any:
        """Remove and return the next item. Raises EmptyCollectionError."""
        pass

    @abstractmethod
    def peek(self) -> Any:
        """Return the next item without removing it. Raises EmptyCollectionError."""
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()


class NavigableHistory(ABC):
    """Abstract base class for browser-style history lists with a cursor."""

    @abstractmethod
    def add(self, item: Any) -> None:
        pass

    @abstractmethod
    def navigate_forward(self) -> Optional[Any]:
        """Move the cursor one step towards the tail; None at the end."""
        pass

    @abstractmethod
    def navigate_backward(self) -> Optional[Any]:
        """Move the cursor one step towards the head; None at the start."""
        pass

    @abstractmethod
    def get_current(self) -> Optional[Any]:
        pass

    @abstractmethod
    def reset_navigation(self) -> None:
        """Put the cursor back on the first element."""
        pass

from typing import Any, Iterator, List

from ..config import DEFAULT_CONFIG
from ..core.exceptions import EmptyCollectionError, InvalidArgumentError
from ..core.interfaces import OrderedContainer
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Stack(OrderedContainer):
    """
    📚 Bounded LIFO stack that forgets its oldest entry when full 📚

    Meant for undo histories: pushing onto a full stack drops the bottom
    element instead of rejecting the new one.

        capacity 3, push d:   [a, b, c]  →  [b, c, d]
                               ↑ bottom         ↑ top

    Eviction shifts the whole backing list, O(n). Fine for small bounds
    (undo stacks of ~50); not for large ones.
    """

    DEFAULT_CAPACITY = DEFAULT_CONFIG.stack_capacity

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise InvalidArgumentError(f"Stack capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: List[Any] = []  # bottom at index 0

    def push(self, item: Any) -> None:
        if len(self._items) >= self._capacity:
            evicted = self._items.pop(0)
            logger.debug("Stack full (capacity %d), evicted oldest item %r",
                         self._capacity, evicted)
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise EmptyCollectionError("Stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise EmptyCollectionError("Stack is empty")
        return self._items[-1]

    def insert(self, item: Any) -> None:
        self.push(item)

    def remove_next(self) -> Any:
        return self.pop()

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __iter__(self) -> Iterator[Any]:
        """Top to bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r}, capacity={self._capacity})"

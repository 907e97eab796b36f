from dataclasses import dataclass
from typing import Any, Iterator, Optional

from ..core.exceptions import EmptyCollectionError
from ..core.interfaces import OrderedContainer


@dataclass
class QueueNode:
    data: Any
    next: Optional['QueueNode'] = None


class Queue(OrderedContainer):
    """
    Unbounded FIFO queue on a singly linked chain.

        front → [a] → [b] → [c] ← rear

    enqueue links at the rear, dequeue unlinks at the front; both O(1).
    """

    def __init__(self):
        self._front: Optional[QueueNode] = None
        self._rear: Optional[QueueNode] = None
        self._size = 0

    def enqueue(self, item: Any) -> None:
        node = QueueNode(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        if self._front is None:
            raise EmptyCollectionError("Queue is empty")

        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        if self._front is None:
            raise EmptyCollectionError("Queue is empty")
        return self._front.data

    def insert(self, item: Any) -> None:
        self.enqueue(item)

    def remove_next(self) -> Any:
        return self.dequeue()

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._front = self._rear = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        """Front to rear."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    # Pickled as a flat list so long queues don't recurse node by node
    def __getstate__(self) -> dict:
        return {"items": list(self)}

    def __setstate__(self, state: dict) -> None:
        self.__init__()
        for item in state["items"]:
            self.enqueue(item)

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"

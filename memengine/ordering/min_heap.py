from typing import Any, Iterable, List, Optional

from ..core.exceptions import EmptyCollectionError
from ..core.interfaces import OrderedContainer


class MinHeap(OrderedContainer):
    """
    ⛰️ Array-backed binary min-heap ⛰️

    Index arithmetic:
    ┌───────────────┬──────────────┐
    │ parent(i)     │ (i - 1) // 2 │
    │ left(i)       │ 2i + 1       │
    │ right(i)      │ 2i + 2       │
    └───────────────┴──────────────┘

    Invariant: heap[i] <= heap[left(i)] and heap[i] <= heap[right(i)], so
    heap[0] is always the minimum. Items only need to support ``<``.

    Changing an item's priority in place is not supported; remove it and
    insert it again instead.
    """

    def __init__(self, elements: Optional[Iterable[Any]] = None):
        self._heap: List[Any] = list(elements) if elements is not None else []
        if self._heap:
            self._build_heap()

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    def _build_heap(self) -> None:
        """Bottom-up heapify: O(n) for the bulk constructor."""
        for i in range(self._parent(len(self._heap) - 1), -1, -1):
            self._percolate_down(i)

    def insert(self, element: Any) -> None:
        self._heap.append(element)
        self._percolate_up(len(self._heap) - 1)

    def extract_min(self) -> Any:
        """
        ⬇️ Remove and return the smallest element ⬇️

        The last element replaces the root and sinks back into place.

        Raises:
            EmptyCollectionError: If the heap is empty
        """
        if not self._heap:
            raise EmptyCollectionError("Heap is empty")

        minimum = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._percolate_down(0)
        return minimum

    def peek_min(self) -> Any:
        if not self._heap:
            raise EmptyCollectionError("Heap is empty")
        return self._heap[0]

    def _percolate_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = self._parent(index)
            if not heap[index] < heap[parent]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _percolate_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            left = self._left(index)
            right = self._right(index)

            if left < size and heap[left] < heap[smallest]:
                smallest = left
            if right < size and heap[right] < heap[smallest]:
                smallest = right

            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def remove_next(self) -> Any:
        return self.extract_min()

    def peek(self) -> Any:
        return self.peek_min()

    def size(self) -> int:
        return len(self._heap)

    def clear(self) -> None:
        self._heap.clear()

    def get_all(self) -> List[Any]:
        """Copy of the backing array, in heap (not sorted) order."""
        return list(self._heap)

    def __repr__(self) -> str:
        return f"MinHeap({self._heap!r})"

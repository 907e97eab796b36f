from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from ..core.exceptions import EmptyCollectionError, IndexOutOfBoundsError
from ..core.interfaces import NavigableHistory

NIL = -1


@dataclass
class ListNode:
    data: Any
    prev: int = NIL
    next: int = NIL


class DoubleLinkedList(NavigableHistory):
    """
    🧭 Doubly linked list with a browser-style navigation cursor 🧭

    Nodes live in an arena (a plain list) and refer to each other by arena
    index instead of by object reference. Slots freed by remove_last are
    recycled by the next add.

    Arena example after add(a), add(b), add_first(z):
    ┌───────┬──────┬──────┬──────┐
    │ index │ data │ prev │ next │
    ├───────┼──────┼──────┼──────┤
    │   0   │  a   │  2   │  1   │
    │   1   │  b   │  0   │ NIL  │  ← tail
    │   2   │  z   │ NIL  │  0   │  ← head
    └───────┴──────┴──────┴──────┘

    The cursor starts on the first node ever added to an empty list and
    only moves through navigate_forward / navigate_backward /
    reset_navigation. Moving past either end returns None and leaves the
    cursor where it was.
    """

    def __init__(self):
        self._nodes: List[Optional[ListNode]] = []
        self._free: List[int] = []
        self._head = NIL
        self._tail = NIL
        self._current = NIL
        self._size = 0

    def _allocate(self, data: Any) -> int:
        node = ListNode(data)
        if self._free:
            index = self._free.pop()
            self._nodes[index] = node
        else:
            index = len(self._nodes)
            self._nodes.append(node)
        return index

    def _release(self, index: int) -> None:
        self._nodes[index] = None
        self._free.append(index)

    def add(self, item: Any) -> None:
        """Append item at the tail."""
        index = self._allocate(item)

        if self._head == NIL:
            self._head = self._tail = self._current = index
        else:
            self._nodes[self._tail].next = index
            self._nodes[index].prev = self._tail
            self._tail = index
        self._size += 1

    def add_first(self, item: Any) -> None:
        """Prepend item at the head."""
        index = self._allocate(item)

        if self._head == NIL:
            self._head = self._tail = self._current = index
        else:
            self._nodes[index].next = self._head
            self._nodes[self._head].prev = index
            self._head = index
        self._size += 1

    def remove_last(self) -> Any:
        """
        Remove and return the tail element.

        A cursor sitting on the tail steps back onto the new tail.

        Raises:
            EmptyCollectionError: If the list is empty
        """
        if self._tail == NIL:
            raise EmptyCollectionError("List is empty")

        index = self._tail
        node = self._nodes[index]

        if self._head == self._tail:
            self._head = self._tail = self._current = NIL
        else:
            self._tail = node.prev
            self._nodes[self._tail].next = NIL
            if self._current == index:
                self._current = self._tail

        self._release(index)
        self._size -= 1
        return node.data

    def navigate_forward(self) -> Optional[Any]:
        if self._current != NIL and self._nodes[self._current].next != NIL:
            self._current = self._nodes[self._current].next
            return self._nodes[self._current].data
        return None

    def navigate_backward(self) -> Optional[Any]:
        if self._current != NIL and self._nodes[self._current].prev != NIL:
            self._current = self._nodes[self._current].prev
            return self._nodes[self._current].data
        return None

    def get_current(self) -> Optional[Any]:
        return self._nodes[self._current].data if self._current != NIL else None

    def reset_navigation(self) -> None:
        self._current = self._head

    def get(self, index: int) -> Any:
        """
        Element at position index, counted from the head.

        Raises:
            IndexOutOfBoundsError: If index is outside [0, size)
        """
        if index < 0 or index >= self._size:
            raise IndexOutOfBoundsError(f"Index: {index}, Size: {self._size}")

        position = self._head
        for _ in range(index):
            position = self._nodes[position].next
        return self._nodes[position].data

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self.__init__()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        position = self._head
        while position != NIL:
            node = self._nodes[position]
            yield node.data
            position = node.next

    def __repr__(self) -> str:
        return "[" + " <-> ".join(repr(item) for item in self) + "]"

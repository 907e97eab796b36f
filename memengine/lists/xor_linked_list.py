from dataclasses import dataclass
from typing import Any, List, Optional

from ..core.exceptions import IndexOutOfBoundsError
from ..core.interfaces import NavigableHistory

NULL = 0  # arena slot 0 is a sentinel, never a real node


@dataclass
class XORNode:
    data: Any
    link: int = NULL  # prev_index ^ next_index


class XORLinkedList(NavigableHistory):
    """
    ⊕ Memory-light list: one combined link per node ⊕

    Each node stores ``prev ^ next`` (arena indexes) instead of two links.
    Walking needs the index you came from:

        next = prev ^ node.link        (moving forward)
        prev = next ^ node.link        (moving backward)

    Arena slot 0 is reserved as the null index, so ``x ^ NULL == x`` and both
    ends of the list need no special casing.

    Arena after add(a), add(b), add(c):
    ┌───────┬──────┬─────────────────┐
    │ index │ data │ link            │
    ├───────┼──────┼─────────────────┤
    │   0   │  –   │ (sentinel)      │
    │   1   │  a   │ 0 ^ 2 = 2       │  ← head
    │   2   │  b   │ 1 ^ 3 = 2       │
    │   3   │  c   │ 2 ^ 0 = 2       │  ← tail
    └───────┴──────┴─────────────────┘

    The navigation cursor is the pair (previous index, current index).
    """

    def __init__(self):
        self._nodes: List[XORNode] = [XORNode(None)]
        self._head = NULL
        self._tail = NULL
        self._size = 0
        self._cursor_prev = NULL
        self._cursor = NULL

    def add(self, item: Any) -> None:
        """Append item at the tail."""
        index = len(self._nodes)
        # the new tail's next is NULL, so its link is just the old tail
        self._nodes.append(XORNode(item, self._tail ^ NULL))

        if self._head == NULL:
            self._head = index
            self._cursor_prev, self._cursor = NULL, index
        else:
            # old tail: prev ^ NULL  →  prev ^ index
            self._nodes[self._tail].link ^= index
        self._tail = index
        self._size += 1

    def _walk(self, start: int) -> List[Any]:
        result = []
        came_from = NULL
        position = start
        while position != NULL:
            node = self._nodes[position]
            result.append(node.data)
            came_from, position = position, came_from ^ node.link
        return result

    def traverse_forward(self) -> List[Any]:
        return self._walk(self._head)

    def traverse_backward(self) -> List[Any]:
        return self._walk(self._tail)

    def get(self, index: int) -> Any:
        if index < 0 or index >= self._size:
            raise IndexOutOfBoundsError(f"Index: {index}, Size: {self._size}")

        came_from = NULL
        position = self._head
        for _ in range(index):
            came_from, position = position, came_from ^ self._nodes[position].link
        return self._nodes[position].data

    def navigate_forward(self) -> Optional[Any]:
        if self._cursor == NULL:
            return None

        following = self._cursor_prev ^ self._nodes[self._cursor].link
        if following == NULL:
            return None

        self._cursor_prev, self._cursor = self._cursor, following
        return self._nodes[self._cursor].data

    def navigate_backward(self) -> Optional[Any]:
        if self._cursor == NULL or self._cursor_prev == NULL:
            return None

        previous = self._cursor_prev
        # the node before `previous` is recovered from its link and its next (the cursor)
        self._cursor_prev = self._nodes[previous].link ^ self._cursor
        self._cursor = previous
        return self._nodes[self._cursor].data

    def get_current(self) -> Optional[Any]:
        return self._nodes[self._cursor].data if self._cursor != NULL else None

    def reset_navigation(self) -> None:
        self._cursor_prev, self._cursor = NULL, self._head

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self.__init__()

    def __len__(self) -> int:
        return self._size

    def __iter__(self):
        return iter(self.traverse_forward())

    def __repr__(self) -> str:
        return repr(self.traverse_forward())

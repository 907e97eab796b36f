from bisect import bisect_left, bisect_right
from typing import Any, Iterator, List, Optional, Tuple

from ...config import DEFAULT_CONFIG
from ...core.exceptions import InvalidArgumentError
from ...core.interfaces import IndexStore
from ...utils.logger import get_logger
from .node import BTreeNode

logger = get_logger(__name__)


class BPlusTree(IndexStore):
    """
    🌲 In-memory B+ tree with linked leaves 🌲

    Internal nodes only route; every key/value pair lives in a leaf, and the
    leaves are chained left to right so range scans walk the chain instead of
    climbing back up the tree.

    Shape (order 4):
    ┌─────────────────────────────────────────────────────────┐
    │                      [ 20 | 40 ]                        │
    │                     /     |     \\                      │
    │          [5 | 10] → [20 | 30] → [40 | 50 | 60] → ∅      │
    └─────────────────────────────────────────────────────────┘

    A key equal to a separator lives in the separator's right subtree.

    Insertion splits every full node it meets on the way down (preemptive
    split), so a split never has to travel back up. Keys are unique:
    inserting an existing key replaces its value.
    """

    ORDER = DEFAULT_CONFIG.btree_order

    def __init__(self, order: int = ORDER):
        # a full node of an even order splits into two halves of at least
        # order/2 - 1 keys each; odd orders would leave an underfull half
        if order < 4 or order % 2:
            raise InvalidArgumentError(
                f"B+ tree order must be an even number of at least 4, got {order}")
        self._order = order
        self._root = BTreeNode.leaf()
        self._size = 0

    @property
    def order(self) -> int:
        return self._order

    def _is_full(self, node: BTreeNode) -> bool:
        return len(node.keys) >= self._order - 1

    @staticmethod
    def _check_key(key: Any) -> None:
        if key is None:
            raise InvalidArgumentError("Key cannot be None")

    def _find_leaf(self, key: Any) -> BTreeNode:
        node = self._root
        while not node.is_leaf:
            node = node.children[bisect_right(node.keys, key)]
        return node

    def insert(self, key: Any, value: Any) -> None:
        """
        ➕ Insert a key/value pair ➕

        Flow:
        1. 🔍 Existing key → overwrite the value in its leaf, done
        2. 🪓 Full root → new root above it, split the old root
        3. ⬇️ Descend, splitting any full child before stepping into it
        4. 🍃 Insert into the leaf at its sorted position

        Raises:
            InvalidArgumentError: If key is None
        """
        self._check_key(key)

        leaf = self._find_leaf(key)
        i = bisect_left(leaf.keys, key)
        if i < len(leaf.keys) and leaf.keys[i] == key:
            leaf.values[i] = value
            return

        if self._is_full(self._root):
            new_root = BTreeNode.internal()
            new_root.children.append(self._root)
            self._split_child(new_root, 0)
            self._root = new_root
            logger.debug("B+ tree root split, height is now %d", self.height())

        self._insert_non_full(self._root, key, value)
        self._size += 1

    def _insert_non_full(self, node: BTreeNode, key: Any, value: Any) -> None:
        if node.is_leaf:
            i = bisect_left(node.keys, key)
            node.keys.insert(i, key)
            node.values.insert(i, value)
            return

        i = bisect_right(node.keys, key)
        if self._is_full(node.children[i]):
            self._split_child(node, i)
            if key >= node.keys[i]:
                i += 1

        self._insert_non_full(node.children[i], key, value)

    def _split_child(self, parent: BTreeNode, index: int) -> None:
        """
        🪓 Split parent.children[index] into two siblings 🪓

        Leaf split: the upper half moves to a new right leaf, the right
        leaf's first key is copied up, and the new leaf is spliced into the
        chain.

            [10 | 20 | 30]  →  [10 | 20] → [30]      parent gets 30

        Internal split: the upper half of keys/children moves right and the
        middle key moves up (it is not kept in either half).

            [10 | 20 | 30]  →  [10]   [30]           parent gets 20
        """
        child = parent.children[index]

        if child.is_leaf:
            mid = (len(child.keys) + 1) // 2
            right = BTreeNode.leaf()
            right.keys = child.keys[mid:]
            right.values = child.values[mid:]
            del child.keys[mid:]
            del child.values[mid:]

            right.next = child.next
            child.next = right

            parent.keys.insert(index, right.keys[0])
        else:
            mid = len(child.keys) // 2
            right = BTreeNode.internal()
            promote_key = child.keys[mid]
            right.keys = child.keys[mid + 1:]
            right.children = child.children[mid + 1:]
            del child.keys[mid:]
            del child.children[mid + 1:]

            parent.keys.insert(index, promote_key)

        parent.children.insert(index + 1, right)

    def search(self, key: Any) -> Optional[Any]:
        """Return the value stored under key, or None."""
        self._check_key(key)

        leaf = self._find_leaf(key)
        i = bisect_left(leaf.keys, key)
        if i < len(leaf.keys) and leaf.keys[i] == key:
            return leaf.values[i]
        return None

    def range_search(self, lo: Any, hi: Any) -> List[Any]:
        """
        🔭 Values whose keys satisfy lo <= key <= hi, ascending by key 🔭

        Descends once to the leaf that could hold lo, then follows the leaf
        chain and stops at the first key greater than hi.
        """
        self._check_key(lo)
        self._check_key(hi)

        results: List[Any] = []
        if hi < lo:
            return results

        leaf: Optional[BTreeNode] = self._find_leaf(lo)
        while leaf is not None:
            for key, value in zip(leaf.keys, leaf.values):
                if key > hi:
                    return results
                if key >= lo:
                    results.append(value)
            leaf = leaf.next

        return results

    def remove(self, key: Any) -> Optional[Any]:
        """
        Remove key from its leaf and return its value, or None.

        Nodes are not merged or rebalanced afterwards; separators keep
        routing correctly and an emptied leaf simply stays in the chain.
        """
        self._check_key(key)

        leaf = self._find_leaf(key)
        i = bisect_left(leaf.keys, key)
        if i < len(leaf.keys) and leaf.keys[i] == key:
            leaf.keys.pop(i)
            self._size -= 1
            return leaf.values.pop(i)
        return None

    def put(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def get(self, key: Any) -> Optional[Any]:
        return self.search(key)

    def contains_key(self, key: Any) -> bool:
        self._check_key(key)
        leaf = self._find_leaf(key)
        i = bisect_left(leaf.keys, key)
        return i < len(leaf.keys) and leaf.keys[i] == key

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._root = BTreeNode.leaf()
        self._size = 0

    def height(self) -> int:
        """Number of levels; a lone leaf root has height 1."""
        levels = 1
        node = self._root
        while not node.is_leaf:
            node = node.children[0]
            levels += 1
        return levels

    def _first_leaf(self) -> BTreeNode:
        node = self._root
        while not node.is_leaf:
            node = node.children[0]
        return node

    def items(self) -> Iterator[Tuple[Any, Any]]:
        leaf: Optional[BTreeNode] = self._first_leaf()
        while leaf is not None:
            yield from zip(leaf.keys, leaf.values)
            leaf = leaf.next

    def keys(self) -> List[Any]:
        return [key for key, _ in self.items()]

    def values(self) -> List[Any]:
        return [value for _, value in self.items()]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def _leaves(self) -> List[BTreeNode]:
        """Leaves in key order, collected through the tree rather than the chain."""
        leaves: List[BTreeNode] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                leaves.append(node)
            else:
                stack.extend(reversed(node.children))
        return leaves

    def __setstate__(self, state: dict) -> None:
        self.__dict__.update(state)
        self._relink_leaves()

    def _relink_leaves(self) -> None:
        leaves = self._leaves()
        for left, right in zip(leaves, leaves[1:]):
            left.next = right
        if leaves:
            leaves[-1].next = None

    def __repr__(self) -> str:
        return f"BPlusTree(order={self._order}, size={self._size}, height={self.height()})"

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class NodeKind(Enum):
    """
    🌳 The two shapes a B+ tree node can take 🌳

    🍃 LEAF: keys + parallel values + link to the next leaf
    🔀 INTERNAL: keys + children (len(children) == len(keys) + 1)
    """
    LEAF = "LEAF"
    INTERNAL = "INTERNAL"


@dataclass
class BTreeNode:
    """
    One node of a B+ tree, tagged by kind.

    Fields that do not apply to a kind stay empty: internal nodes never hold
    values or a next link, leaves never hold children.
    """
    kind: NodeKind
    keys: List[Any] = field(default_factory=list)
    values: List[Any] = field(default_factory=list)
    children: List['BTreeNode'] = field(default_factory=list)
    next: Optional['BTreeNode'] = None

    @classmethod
    def leaf(cls) -> 'BTreeNode':
        return cls(NodeKind.LEAF)

    @classmethod
    def internal(cls) -> 'BTreeNode':
        return cls(NodeKind.INTERNAL)

    @property
    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    def __getstate__(self) -> dict:
        # The leaf chain is rebuilt by the owning tree on unpickling
        state = self.__dict__.copy()
        state["next"] = None
        return state

    def __setstate__(self, state: dict) -> None:
        self.__dict__.update(state)

    def __repr__(self) -> str:
        return f"BTreeNode({self.kind.value}, keys={self.keys})"

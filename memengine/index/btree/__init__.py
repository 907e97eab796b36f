from .node import NodeKind, BTreeNode
from .bplus_tree import BPlusTree

__all__ = ["NodeKind", "BTreeNode", "BPlusTree"]

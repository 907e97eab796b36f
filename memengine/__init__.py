"""
memengine: an embedded, in-memory indexing and scheduling engine.

COMPONENTS:
┌──────────────────────────────────────────────────────────────┐
│ Indexes      HashTable, LinearProbingHash, BPlusTree         │
│ Ordering     MinHeap, Queue, Stack                           │
│ History      DoubleLinkedList, XORLinkedList                 │
│ Analysis     Graph (BFS / DFS / SCC)                         │
│ Text         KMPAlgorithm, HuffmanCoding                     │
│ Grid         SparseMatrix                                    │
└──────────────────────────────────────────────────────────────┘

Every structure is single-threaded and owned by one caller. Structures
never reference each other, and all of them can be pickled as a whole.
"""

from .config import EngineConfig, DEFAULT_CONFIG
from .core.exceptions import (
    EngineException,
    InvalidArgumentError,
    EmptyCollectionError,
    IndexOutOfBoundsError,
)
from .index import HashTable, LinearProbingHash, ProbeStats, BPlusTree
from .ordering import MinHeap, Queue, Stack
from .lists import DoubleLinkedList, XORLinkedList
from .graph import Graph
from .text import KMPAlgorithm, HuffmanCoding
from .grid import SparseMatrix
from .utils.logger import configure_logging

__all__ = [
    "EngineConfig",
    "DEFAULT_CONFIG",
    "EngineException",
    "InvalidArgumentError",
    "EmptyCollectionError",
    "IndexOutOfBoundsError",
    "HashTable",
    "LinearProbingHash",
    "ProbeStats",
    "BPlusTree",
    "MinHeap",
    "Queue",
    "Stack",
    "DoubleLinkedList",
    "XORLinkedList",
    "Graph",
    "KMPAlgorithm",
    "HuffmanCoding",
    "SparseMatrix",
    "configure_logging",
]

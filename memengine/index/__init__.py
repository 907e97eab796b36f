"""
KEY/VALUE INDEXES

Three interchangeable implementations of the IndexStore contract:

┌───────────────────┬──────────────────────────┬───────────────────────┐
│ Index             │ Collision / ordering     │ Best at               │
├───────────────────┼──────────────────────────┼───────────────────────┤
│ HashTable         │ separate chaining        │ point lookups         │
│ LinearProbingHash │ open addressing          │ point lookups, compact│
│ BPlusTree         │ sorted, linked leaves    │ range scans           │
└───────────────────┴──────────────────────────┴───────────────────────┘

An orchestrator that keeps the same record in several indexes is
responsible for keeping them in step.
"""

from .hash import HashTable, LinearProbingHash, ProbeStats
from .btree import BPlusTree

__all__ = ["HashTable", "LinearProbingHash", "ProbeStats", "BPlusTree"]

from .hash_table import HashEntry, HashTable
from .linear_probing import LinearProbingHash, ProbeSlot, ProbeStats

__all__ = ["HashEntry", "HashTable", "LinearProbingHash", "ProbeSlot", "ProbeStats"]

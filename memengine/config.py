"""
Engine-wide defaults.

Each structure also carries its own class constants; this dataclass gathers
them so an orchestrator can build every structure from one place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    hash_table_capacity: int = 16
    hash_table_load_factor: float = 0.75

    probing_capacity: int = 101  # prime
    probing_load_factor: float = 0.7

    btree_order: int = 4

    stack_capacity: int = 100

    kmp_lps_cache_size: int = 128


DEFAULT_CONFIG = EngineConfig()

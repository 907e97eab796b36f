from operator import attrgetter
from typing import List, Optional, Tuple

from cachetools import LRUCache, cachedmethod

from ..config import DEFAULT_CONFIG


class KMPAlgorithm:
    """
    🔍 Knuth-Morris-Pratt substring search 🔍

    Every occurrence (overlaps included) is found in O(n + m). On a mismatch
    the pattern falls back along its failure table instead of rewinding the
    text.

    Failure (LPS) table for "ABABCABAB":
    ┌─────────┬───┬───┬───┬───┬───┬───┬───┬───┬───┐
    │ pattern │ A │ B │ A │ B │ C │ A │ B │ A │ B │
    │ lps     │ 0 │ 0 │ 1 │ 2 │ 0 │ 1 │ 2 │ 3 │ 4 │
    └─────────┴───┴───┴───┴───┴───┴───┴───┴───┴───┘

    Matching is case-sensitive; normalise case before calling if needed.
    Failure tables of recent patterns are kept in a small LRU cache since
    the same names tend to be searched repeatedly.
    """

    DEFAULT_CACHE_SIZE = DEFAULT_CONFIG.kmp_lps_cache_size

    def __init__(self, cache_size: int = DEFAULT_CACHE_SIZE):
        self._lps_cache: LRUCache = LRUCache(maxsize=cache_size)

    @cachedmethod(attrgetter("_lps_cache"))
    def compute_lps(self, pattern: str) -> Tuple[int, ...]:
        """Length of the longest proper prefix that is also a suffix, per position."""
        m = len(pattern)
        lps = [0] * m
        length = 0
        i = 1

        while i < m:
            if pattern[i] == pattern[length]:
                length += 1
                lps[i] = length
                i += 1
            elif length != 0:
                length = lps[length - 1]
            else:
                lps[i] = 0
                i += 1

        return tuple(lps)

    def search(self, text: Optional[str], pattern: Optional[str]) -> List[int]:
        """
        Start index of every occurrence of pattern in text.

        An empty pattern matches nowhere: the result is ``[]``.
        """
        matches: List[int] = []
        if not text or not pattern:
            return matches

        n, m = len(text), len(pattern)
        lps = self.compute_lps(pattern)
        i = j = 0  # text index, pattern index

        while i < n:
            if text[i] == pattern[j]:
                i += 1
                j += 1
                if j == m:
                    matches.append(i - j)
                    j = lps[j - 1]
            elif j != 0:
                j = lps[j - 1]
            else:
                i += 1

        return matches

    def contains(self, text: Optional[str], pattern: Optional[str]) -> bool:
        return bool(self.search(text, pattern))

    def count_occurrences(self, text: Optional[str], pattern: Optional[str]) -> int:
        return len(self.search(text, pattern))

    def clear_cache(self) -> None:
        self._lps_cache.clear()

    # Cached tables are rebuilt on demand, only the bound travels
    def __getstate__(self) -> dict:
        return {"cache_size": self._lps_cache.maxsize}

    def __setstate__(self, state: dict) -> None:
        self.__init__(state["cache_size"])

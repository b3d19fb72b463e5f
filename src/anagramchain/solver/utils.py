"""Utility functions for the anagram chain solver."""

from collections import Counter
from functools import lru_cache

from anagramchain.solver.config import SolverConfig

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


@lru_cache(maxsize=300_000)
def canonicalize(word: str) -> str:
    """Return the canonical signature of a word: its characters sorted by code point.

    Two words are anagrams of each other iff their signatures are equal.  No case folding
    or other normalization is applied.
    """
    return "".join(sorted(word))


def is_derivation(shorter: str, longer: str) -> bool:
    """Return whether `longer` is `shorter` plus exactly one inserted character, up to order.

    Args:
        shorter (str): The earlier word in a chain.
        longer (str): The later word in a chain.
    """
    if len(longer) != len(shorter) + 1:
        return False
    extra = Counter(longer)
    extra.subtract(shorter)
    # All counts must be non-negative and exactly one character left over.
    return min(extra.values()) >= 0 and extra.total() == 1


def alphabet(settings: SolverConfig) -> str:
    """Return the characters tried as insertions when searching for successors."""
    return "".join(chr(cp) for cp in range(settings.alphabet_first, settings.alphabet_last + 1))

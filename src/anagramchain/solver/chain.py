"""Memoized depth-first search for the longest derived anagram chain."""

from collections.abc import Iterator

from anagramchain.dictionary import DictionaryTable
from anagramchain.solver.utils import alphabet, canonicalize


class ChainSolver:
    """Compute, for each word, the longest chain reachable by single-character insertions.

    Results are memoized on the WordEntry records of the table.  Every step adds one
    character, so the successor graph is acyclic and no cycle guard is needed.
    """

    def __init__(self, table: DictionaryTable) -> None:
        self.table = table
        self.alphabet = alphabet(table.settings)
        self.max_next_steps = table.settings.max_next_steps
        self.n_solved = 0
        """Number of entries whose memo was filled in by this solver."""

    def successor_groups(self, word_id: int) -> Iterator[range]:
        """Yield the id ranges of all anagram groups one insertion away from a word.

        Groups are produced in alphabet order of the inserted character.
        """
        table = self.table
        canonical = table[word_id].canonical
        for ch in self.alphabet:
            group = table.index.lookup(canonicalize(canonical + ch))
            if group is not None:
                yield table.group_ids(group)

    def successors(self, word_id: int) -> list[int]:
        """Return the ids of all words derivable from a word by inserting one character."""
        return [succ for ids in self.successor_groups(word_id) for succ in ids]

    def longest_chain(self, word_id: int) -> int:
        """Return the number of words in the longest chain starting at `word_id`."""
        entry = self.table[word_id]
        if entry.best_chain_length:
            return entry.best_chain_length

        max_length = 1
        next_ids: list[int] = []
        for ids in self.successor_groups(word_id):
            for succ in ids:
                chain_length = 1 + self.longest_chain(succ)
                if chain_length > max_length:
                    max_length = chain_length
                    next_ids = [succ]
                elif chain_length == max_length and len(next_ids) < self.max_next_steps:
                    # Ties beyond the cap are dropped
                    next_ids.append(succ)

        # Publish the ids before the length: a non-zero length marks the memo as complete.
        entry.best_next_ids = tuple(next_ids)
        entry.best_chain_length = max_length
        self.n_solved += 1
        return max_length

    def solve_all(self) -> int:
        """Solve every entry of the table and return the overall longest chain length."""
        return max(self.longest_chain(word_id) for word_id in range(len(self.table)))

"""Dictionary table: word entries sorted so that anagram groups are contiguous."""

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from anagramchain.index import AnagramGroup, AnagramIndex
from anagramchain.solver.config import SolverConfig, get_config
from anagramchain.solver.utils import canonicalize


@dataclass(slots=True)
class WordEntry:
    """A single dictionary word plus its chain-search memo."""

    text: str
    """The literal word."""

    canonical: str
    """Characters of `text` sorted by code point."""

    id: int = -1
    """Position in the sorted dictionary table (-1 until the table is sorted)."""

    best_chain_length: int = 0
    """Length of the longest chain starting at this word; 0 means not yet computed."""

    best_next_ids: tuple[int, ...] = ()
    """Ids of successors lying on some longest chain, capped at the fan-out limit."""

    @property
    def length(self) -> int:
        """Number of characters in the word."""
        return len(self.text)

    @property
    def solved(self) -> bool:
        """Whether the chain-search memo has been filled in."""
        return self.best_chain_length > 0


class DictionaryTable:
    """Sorted word entries together with the anagram index built over them.

    Owned by a single run and passed by reference to the solver and enumerator.
    """

    def __init__(self, entries: list[WordEntry], index: AnagramIndex, settings: SolverConfig):
        self.entries = entries
        self.index = index
        self.settings = settings
        self.truncated = False
        """Set if the input had more valid words than `settings.max_dict_size`."""

        self.skipped = 0
        """Number of empty or oversized input strings dropped."""

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, word_id: int) -> WordEntry:
        return self.entries[word_id]

    def group_ids(self, group: AnagramGroup) -> range:
        """Return the ids of all entries in an anagram group."""
        return range(group.start, group.start + group.size)

    def find_group(self, word: str) -> AnagramGroup | None:
        """Look up the anagram group of an arbitrary word (dictionary member or not)."""
        if not word:
            return None
        return self.index.lookup(canonicalize(word))

    def words(self, ids: Iterable[int]) -> list[str]:
        """Map entry ids to their word texts."""
        return [self.entries[i].text for i in ids]


def build_dictionary(
    raw_words: Iterable[str],
    settings: SolverConfig | None = None,
    *,
    out: TextIO | None = None,
) -> DictionaryTable:
    """Build the sorted dictionary table and its anagram index.

    Args:
        raw_words (Iterable[str]): Candidate words, already stripped of line terminators.
        settings (SolverConfig): Word length, dictionary size and index capacity limits.
        out (TextIO | None): Stream for the truncation warning.  Defaults to stderr.

    Returns:
        The populated DictionaryTable.

    Raises:
        ValueError: If no valid words remain after filtering.
    """
    if settings is None:
        settings = get_config()
    entries: list[WordEntry] = []
    skipped = 0
    truncated = False
    for word in raw_words:
        if len(entries) >= settings.max_dict_size:
            print(
                f"Warning: Dictionary size exceeds maximum limit of {settings.max_dict_size}. "
                "Truncating.",
                file=out or sys.stderr,
                flush=True,
            )
            truncated = True
            break
        if not word or len(word) > settings.max_word_len:
            skipped += 1
            continue
        entries.append(WordEntry(text=word, canonical=canonicalize(word)))

    if not entries:
        raise ValueError("Dictionary is empty or contains no valid words.")

    # Stable sort: anagrams keep their input order inside a group
    entries.sort(key=lambda entry: entry.canonical)
    for word_id, entry in enumerate(entries):
        entry.id = word_id

    index = AnagramIndex(settings.index_capacity)
    group_start = 0
    while group_start < len(entries):
        canonical = entries[group_start].canonical
        group_end = group_start + 1
        while group_end < len(entries) and entries[group_end].canonical == canonical:
            group_end += 1
        index.insert(canonical, group_start, group_end - group_start)
        group_start = group_end

    table = DictionaryTable(entries, index, settings)
    table.truncated = truncated
    table.skipped = skipped
    return table

"""Reconstruction of all longest chains from the solver's memo."""

from collections.abc import Iterator

from anagramchain.dictionary import DictionaryTable


def enumerate_chains(table: DictionaryTable, word_id: int) -> Iterator[list[str]]:
    """Yield every longest chain starting at `word_id`, as lists of words from first to last.

    Chains follow `best_next_ids` in stored order, so the output is stable for a stable input.
    Each recursive call extends its own copy of the path.

    Raises:
        ValueError: If the word has not been solved yet.
    """
    if not table[word_id].solved:
        raise ValueError(f"Word {table[word_id].text!r} has not been solved yet.")
    yield from _extend([], table, word_id)


def _extend(path: list[str], table: DictionaryTable, word_id: int) -> Iterator[list[str]]:
    entry = table[word_id]
    path = path + [entry.text]
    if not entry.best_next_ids:
        yield path
        return
    for next_id in entry.best_next_ids:
        yield from _extend(path, table, next_id)

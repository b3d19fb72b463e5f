"""Module for loading the dictionary word list."""

from os import PathLike
from pathlib import Path


def load_word_list(path: str | PathLike, *, encoding: str = "utf-8") -> list[str]:
    """Load raw candidate words from a dictionary file, one per line.

    Only line terminators are removed; filtering of empty or oversized words is left to
    `build_dictionary`.  A line that does not decode under `encoding` is returned as an
    empty string, so it is skipped (and counted) like any other invalid word.

    Args:
        path: Path to the dictionary file.
        encoding: Text encoding of the file.

    Returns:
        The lines of the file, in file order.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Could not open dictionary file '{word_list_path}'.")

    words: list[str] = []
    with word_list_path.open("rb") as f:
        for raw_line in f:
            line = raw_line.rstrip(b"\n").rstrip(b"\r")
            try:
                words.append(line.decode(encoding))
            except UnicodeDecodeError:
                words.append("")
    return words

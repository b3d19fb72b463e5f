"""Tests for dictionary file loading."""

from pathlib import Path

import pytest

from anagramchain.wordlist import load_word_list


def test_strips_only_line_terminators(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_bytes(b"cat\r\ndog\n\n bird \nlast")

    assert load_word_list(path) == ["cat", "dog", "", " bird ", "last"]


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Could not open dictionary file"):
        load_word_list(tmp_path / "missing.txt")


def test_encoding(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_bytes("caf\xe9\n".encode("latin-1"))

    assert load_word_list(path, encoding="latin-1") == ["caf\xe9"]


def test_undecodable_line_becomes_empty(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_bytes(b"a\nat\nate\ncaf\xe9\n")

    assert load_word_list(path) == ["a", "at", "ate", ""]

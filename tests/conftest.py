"""Shared fixtures for the anagram chain tests."""

import pytest

from anagramchain.dictionary import DictionaryTable, build_dictionary
from anagramchain.solver.config import SolverConfig


@pytest.fixture
def settings() -> SolverConfig:
    """Small settings so that tests do not allocate a million-slot index."""
    return SolverConfig(max_dict_size=500, index_capacity=1009, log_dir=None)


@pytest.fixture
def make_table(settings: SolverConfig):
    """Build a DictionaryTable from a list of words."""

    def _make(words: list[str], **overrides) -> DictionaryTable:
        cfg = settings.model_copy(update=overrides) if overrides else settings
        return build_dictionary(words, cfg)

    return _make

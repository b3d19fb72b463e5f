"""Tests for the canonicalizer and related helpers."""

from itertools import permutations

from anagramchain.solver.config import SolverConfig
from anagramchain.solver.utils import alphabet, canonicalize, is_derivation


def test_canonicalize_sorts_by_code_point() -> None:
    assert canonicalize("tea") == "aet"
    assert canonicalize("Tea") == "Tae"  # uppercase sorts before lowercase
    assert canonicalize("b-a!") == "!-ab"


def test_canonicalize_is_permutation_invariant_and_idempotent() -> None:
    word = "stone"
    signatures = {canonicalize("".join(p)) for p in permutations(word)}
    assert signatures == {"enost"}
    assert canonicalize(canonicalize(word)) == canonicalize(word)


def test_is_derivation() -> None:
    assert is_derivation("at", "tea")
    assert is_derivation("a", "ab")
    assert not is_derivation("at", "at")
    assert not is_derivation("at", "bead")
    assert not is_derivation("at", "bed")  # same length step but different letters
    assert not is_derivation("aa", "abc")


def test_default_alphabet_is_printable_ascii_without_space() -> None:
    chars = alphabet(SolverConfig(log_dir=None))
    assert len(chars) == 94
    assert chars[0] == "!"
    assert chars[-1] == "~"
    assert " " not in chars


def test_alphabet_follows_settings() -> None:
    chars = alphabet(SolverConfig(alphabet_first=ord("a"), alphabet_last=ord("e"), log_dir=None))
    assert chars == "abcde"

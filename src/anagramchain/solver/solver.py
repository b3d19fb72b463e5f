"""Main solver module: longest derived anagram chains from a starting word."""

import hashlib
import sys
from dataclasses import dataclass, field
from datetime import datetime
from os import PathLike, devnull
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from anagramchain.dictionary import DictionaryTable, build_dictionary
from anagramchain.solver.backtrack import enumerate_chains
from anagramchain.solver.chain import ChainSolver
from anagramchain.solver.config import SolverConfig, get_config
from anagramchain.solver.parallel import SurveyResult, survey
from anagramchain.solver.utils import TIMESTAMP_FMT
from anagramchain.wordlist import load_word_list

CHAIN_SEPARATOR = " -> "


@dataclass
class ChainReport:
    """Result of a chain search from one starting word."""

    start_word: str
    """The starting word as given by the user."""

    found: bool
    """Whether any anagram of the starting word is in the dictionary."""

    max_length: int = 0
    """Longest chain length over all anagrams of the starting word (0 if not found)."""

    chains: list[list[str]] = field(default_factory=list)
    """Every longest chain, first word to last.  Empty unless `max_length` > 1."""

    start_ids: list[int] = field(default_factory=list)
    """Ids of the dictionary entries that are anagrams of the starting word."""


def find_chains(
    table: DictionaryTable,
    start_word: str,
    solver: ChainSolver | None = None,
) -> ChainReport:
    """Find the longest chains starting from any anagram of `start_word`.

    Args:
        table (DictionaryTable): The dictionary to search.
        start_word (str): The starting word; it need not itself be in the dictionary,
            as long as one of its anagrams is.
        solver (ChainSolver | None): Solver to reuse (and its memo).  A new one is created
            if None.

    Returns:
        A ChainReport.  If no anagram group matches, no search is performed.
    """
    group = table.find_group(start_word)
    if group is None:
        return ChainReport(start_word=start_word, found=False)

    solver = solver or ChainSolver(table)
    start_ids = list(table.group_ids(group))
    max_length = max(solver.longest_chain(word_id) for word_id in start_ids)

    chains: list[list[str]] = []
    if max_length > 1:
        for word_id in start_ids:
            if table[word_id].best_chain_length == max_length:
                chains.extend(enumerate_chains(table, word_id))

    return ChainReport(
        start_word=start_word,
        found=True,
        max_length=max_length,
        chains=chains,
        start_ids=start_ids,
    )


def print_report(report: ChainReport, out: TextIO | None = None) -> None:
    """Print a ChainReport in console format."""
    if not report.found:
        print(
            f"\nResult: Starting word '{report.start_word}' is not found in the dictionary.",
            file=out,
        )
        return
    if report.max_length <= 1:
        print(
            f"\nResult: No derived anagram chain found starting from '{report.start_word}'.",
            file=out,
        )
        return

    print("\n--- Longest Derived Anagram Chains ---", file=out)
    print(f"Max Chain Length: {report.max_length} words.", file=out)
    for i, chain in enumerate(report.chains, start=1):
        print(f"Chain {i}: {CHAIN_SEPARATOR.join(chain)}", file=out)
    print(f"Total longest chains found: {len(report.chains)}", file=out)
    print("-" * 36, file=out)


def log_path(dictionary_path: str | PathLike, start_word: str, settings: SolverConfig) -> Path | None:
    """Return the log file path for a run, or None if logging to file is disabled."""
    if settings.log_dir is None:
        return None
    # Keep the file name to safe characters; the digest tells apart words that map to the
    # same safe name, e.g. "a!" and "a?".
    safe_word = "".join(ch if ch.isalnum() else "_" for ch in start_word) or "_"
    digest = hashlib.sha256(start_word.encode("utf-8", "surrogatepass")).hexdigest()[:8]
    return Path(settings.log_dir) / Path(dictionary_path).stem / f"{safe_word}-{digest}.log"


def load_dictionary(
    dictionary_path: str | PathLike,
    settings: SolverConfig,
    *,
    logf: TextIO,
) -> tuple[list[str], DictionaryTable]:
    """Load and index a dictionary file, logging timing and index statistics.

    Returns:
        The raw words of the file and the table built from them.
    """
    t_start = time()
    raw_words = load_word_list(dictionary_path, encoding=settings.encoding)
    t_loaded = time()
    print(f"Read {len(raw_words):,} lines from {dictionary_path}", file=logf, flush=True)

    table = build_dictionary(raw_words, settings)
    t_built = time()
    stats = table.index.stats()
    print(
        f"Kept {len(table):,} words, skipped {table.skipped:,}"
        f"{' (truncated)' if table.truncated else ''}.",
        file=logf,
        flush=True,
    )
    print("Index statistics:", file=logf, flush=True)
    pprint(stats._asdict(), stream=logf, width=120)
    print(
        f"Load time: {t_loaded - t_start:.3f}s, build time: {t_built - t_loaded:.3f}s",
        file=logf,
        flush=True,
    )
    return raw_words, table


def solve_one(
    dictionary_path: str | PathLike,
    start_word: str,
    *,
    settings: SolverConfig | None = None,
    logf: TextIO,
    out: TextIO | None = None,
) -> ChainReport:
    """Load a dictionary, search from a starting word and print the report.

    Args:
        dictionary_path: Path to the dictionary file.
        start_word (str): The starting word.
        settings (SolverConfig): Solver settings.
        logf: File object to log the solving process.
        out: Stream for the user-facing report.
    """
    if settings is None:
        settings = get_config()
    start_time_str = datetime.fromtimestamp(time()).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)
    print("Solver config:", file=logf, flush=True)
    pprint(settings.model_dump(), stream=logf, width=120)
    print(f"Dictionary: {dictionary_path}", file=logf, flush=True)
    print(f"Starting word: {start_word}", file=logf, flush=True)

    print("\nLoading and preprocessing dictionary...", file=out)
    _, table = load_dictionary(dictionary_path, settings, logf=logf)
    print(f"Loaded {len(table):,} word entries.", file=out)

    t_start = time()
    solver = ChainSolver(table)
    report = find_chains(table, start_word, solver)
    print(
        f"Search time: {time() - t_start:.3f}s, {solver.n_solved:,} words solved.",
        file=logf,
        flush=True,
    )

    if not report.found:
        print("Starting word not found.", file=logf, flush=True)
    else:
        print(
            f"Max chain length: {report.max_length}, chains: {len(report.chains)}",
            file=logf,
            flush=True,
        )
    print_report(report, out)
    return report


def run(
    dictionary_path: str | PathLike,
    start_word: str,
    *,
    settings: SolverConfig | None = None,
) -> ChainReport:
    """Run the solver for one starting word, writing a log file alongside the console report."""
    if settings is None:
        settings = get_config()
    print("-" * 34)
    logfile = log_path(dictionary_path, start_word, settings)
    if logfile is not None:
        logfile.parent.mkdir(parents=True, exist_ok=True)
        print(f"Log file: {logfile}")

    with open(logfile or devnull, "w", encoding="utf-8") as logf:
        try:
            return solve_one(dictionary_path, start_word, settings=settings, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)


SURVEY_LOG_NAME = "__survey__"


def print_survey(result: SurveyResult, out: TextIO | None = None) -> None:
    """Print the best starting groups found by a survey."""
    print(f"\nAnagram groups examined: {result.groups_examined:,}", file=out)
    if result.max_length <= 1:
        print("Result: No derived anagram chain found in the dictionary.", file=out)
        return
    print(f"Longest chain length: {result.max_length} words.", file=out)
    print("Best starting groups:", file=out)
    for i, (length, words) in enumerate(result.top_groups, start=1):
        print(f"  {i:2d}. {length:3d} words from {', '.join(words)}", file=out)


def run_survey(
    dictionary_path: str | PathLike,
    *,
    settings: SolverConfig | None = None,
    out: TextIO | None = None,
) -> SurveyResult:
    """Survey the whole dictionary and list the chains of the best starting group."""
    if settings is None:
        settings = get_config()
    print("-" * 34, file=out)
    logfile = log_path(dictionary_path, SURVEY_LOG_NAME, settings)
    if logfile is not None:
        logfile.parent.mkdir(parents=True, exist_ok=True)
        print(f"Log file: {logfile}", file=out)

    with open(logfile or devnull, "w", encoding="utf-8") as logf:
        print("Solver config:", file=logf, flush=True)
        pprint(settings.model_dump(), stream=logf, width=120)

        print("\nLoading and preprocessing dictionary...", file=out)
        raw_words, table = load_dictionary(dictionary_path, settings, logf=logf)
        print(f"Loaded {len(table):,} word entries.", file=out)

        t_start = time()
        try:
            result = survey(
                raw_words,
                settings,
                table=table,
                logf=logf,
            )
        except KeyboardInterrupt:
            print("Survey interrupted by user.", file=logf, flush=True)
            print("Survey interrupted by user.", file=out)
            sys.exit(1)
        print(f"Survey time: {time() - t_start:.3f}s", file=logf, flush=True)
        print(f"Longest chain length: {result.max_length}", file=logf, flush=True)

        print_survey(result, out)
        if result.max_length > 1:
            # Every member of a top group is a valid starting word for the same chains
            print_report(find_chains(table, result.top_groups[0][1][0]), out)
    return result

"""Parallel survey: the longest chains anywhere in the dictionary."""

import os
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from multiprocessing import Value
from multiprocessing.sharedctypes import Synchronized
from typing import TextIO

from sortedcontainers import SortedList

from anagramchain.dictionary import DictionaryTable, build_dictionary
from anagramchain.solver.chain import ChainSolver
from anagramchain.solver.config import SolverConfig, get_config
from anagramchain.solver.worker import init_worker_globals, worker_task


@dataclass
class SurveyResult:
    """Summary of a survey over all anagram groups."""

    max_length: int
    """Longest chain length found from any word."""

    top_groups: list[tuple[int, list[str]]] = field(default_factory=list)
    """Best starting groups as `(chain_length, words)`, longest first."""

    groups_examined: int = 0
    """Number of anagram groups solved."""


def get_executor(
    *,
    n_workers: int | None = None,
    raw_words: list[str],
    settings: SolverConfig,
) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor whose workers each hold their own dictionary table.

    Args:
        n_workers (int | None): Number of worker processes to create.  If None,
            defaults to number of CPU cores minus one.
        raw_words (list[str]): Raw dictionary words to pass to workers.
        settings (SolverConfig): Settings to pass to workers.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    worker_ctr: Synchronized[int] = Value("i", 0)

    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, cpus - 1)  # Leave one core free
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(worker_ctr, raw_words, settings.model_dump()),
    )


def chunked(items: list[int], size: int) -> list[list[int]]:
    """Split a list into consecutive chunks of at most `size` items."""
    return [items[i : i + size] for i in range(0, len(items), size)]


def survey(
    raw_words: list[str],
    settings: SolverConfig | None = None,
    *,
    n_workers: int | None = None,
    table: DictionaryTable | None = None,
    logf: TextIO | None = None,
) -> SurveyResult:
    """Compute the longest chain starting from every anagram group of the dictionary.

    Args:
        raw_words (list[str]): Raw dictionary words, in input order.
        settings (SolverConfig): Solver settings.
        n_workers (int | None): Number of worker processes.  0 solves serially in this
            process; None uses `settings.max_workers`, falling back to CPU count minus one.
        table (DictionaryTable | None): Table already built from `raw_words`, if available.
        logf: Optional file object to log progress.

    Returns:
        A SurveyResult.
    """
    if settings is None:
        settings = get_config()
    if table is None:
        table = build_dictionary(raw_words, settings)
    group_starts = [group.start for group in table.index.groups()]
    if n_workers is None:
        n_workers = settings.max_workers

    # Longest first; ties broken by table order
    best: SortedList = SortedList(key=lambda item: (-item[1], item[0]))

    def collect(results: list[tuple[int, int]]) -> None:
        for start, length in results:
            best.add((start, length))
            if len(best) > settings.survey_top_n:
                best.pop()

    if n_workers == 0:
        solver = ChainSolver(table)
        collect([(start, solver.longest_chain(start)) for start in group_starts])
    else:
        chunks = chunked(group_starts, settings.survey_chunk_size)
        with get_executor(n_workers=n_workers, raw_words=raw_words, settings=settings) as executor:
            try:
                futures = [executor.submit(worker_task, chunk) for chunk in chunks]
                for n_done, future in enumerate(as_completed(futures), start=1):
                    collect(future.result())
                    if logf is not None:
                        print(f"Survey: {n_done}/{len(chunks)} chunks done.", file=logf, flush=True)
            except BaseException:
                executor.shutdown(wait=False, cancel_futures=True)
                raise

    top_groups: list[tuple[int, list[str]]] = []
    for start, length in best:
        group = table.find_group(table[start].text)
        assert group is not None, "Surveyed group missing from index."
        top_groups.append((length, table.words(table.group_ids(group))))

    return SurveyResult(
        max_length=top_groups[0][0] if top_groups else 0,
        top_groups=top_groups,
        groups_examined=len(group_starts),
    )

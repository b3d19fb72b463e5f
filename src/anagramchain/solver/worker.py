"""Worker-process side of the parallel survey."""

from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized
from os import devnull

from anagramchain.dictionary import DictionaryTable, build_dictionary
from anagramchain.solver.chain import ChainSolver
from anagramchain.solver.config import SolverConfig


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    table: DictionaryTable
    """The worker's own copy of the dictionary table.  Memo fields are never shared."""

    solver: ChainSolver
    """Solver over `table`; its memo persists across tasks handled by this worker."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(
    worker_ctr: "Synchronized[int]",
    raw_words: list[str],
    settings: dict,
) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        raw_words (list[str]): Raw dictionary words, in input order.  Each worker builds the
            same sorted table, so entry ids agree with the parent process.
        settings (dict): Dict representation of a SolverConfig.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    # The parent has already reported any truncation warning.
    with open(devnull, "w", encoding="utf-8") as sink:
        table = build_dictionary(raw_words, SolverConfig(**settings), out=sink)
    worker_state = WorkerState(worker_idx=worker_idx, table=table, solver=ChainSolver(table))


def worker_task(group_starts: list[int]) -> list[tuple[int, int]]:
    """Solve the anagram groups starting at the given ids.

    Args:
        group_starts (list[int]): Start ids of the anagram groups to solve.

    Returns:
        A list of `(group_start, chain_length)` pairs, one per group.  All words of a group
        share the same chain length, so only the first entry is solved.
    """
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")
    solver = worker_state.solver
    return [(start, solver.longest_chain(start)) for start in group_starts]

"""Tests for the dictionary-wide survey."""

import os
from multiprocessing import Value

import pytest

from anagramchain.solver import worker
from anagramchain.solver.parallel import chunked, get_executor, survey

WORDS = ["a", "at", "ate", "tea", "rate", "i", "in", "pin", "cat", "x", "ax"]


def test_chunked() -> None:
    assert chunked([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunked([], 3) == []


def test_serial_survey(settings) -> None:
    result = survey(WORDS, settings, n_workers=0)

    assert result.max_length == 4
    assert result.groups_examined == 10  # "ate" and "tea" share a group
    assert result.top_groups[0] == (4, ["a"])
    lengths = [length for length, _ in result.top_groups]
    assert lengths == sorted(lengths, reverse=True)


def test_survey_keeps_top_n(settings) -> None:
    cfg = settings.model_copy(update={"survey_top_n": 3})
    result = survey(WORDS, cfg, n_workers=0)

    assert len(result.top_groups) == 3
    assert [length for length, _ in result.top_groups] == [4, 3, 3]


def test_process_pool_survey_matches_serial(settings) -> None:
    cfg = settings.model_copy(update={"survey_chunk_size": 2})
    serial = survey(WORDS, cfg, n_workers=0)
    parallel = survey(WORDS, cfg, n_workers=1)

    assert parallel == serial


def test_too_many_workers_rejected(settings) -> None:
    with pytest.raises(ValueError, match="exceeds CPU count"):
        get_executor(n_workers=(os.cpu_count() or 1) + 1, raw_words=WORDS, settings=settings)


def test_worker_build_is_quiet_on_truncation(settings, monkeypatch, capsys) -> None:
    monkeypatch.setattr(worker, "worker_state", None)
    cfg = settings.model_copy(update={"max_dict_size": 3})

    worker.init_worker_globals(Value("i", 0), WORDS, cfg.model_dump())

    assert len(worker.worker_state.table) == 3
    assert capsys.readouterr().err == ""
    assert worker.worker_task([0]) == [(0, worker.worker_state.solver.longest_chain(0))]

"""Tests for dictionary table construction."""

import io

import pytest

from anagramchain.dictionary import build_dictionary


def test_sorted_by_canonical_with_ids(make_table) -> None:
    table = make_table(["tea", "a", "at", "ate", "ant"])

    assert [e.text for e in table.entries] == ["a", "tea", "ate", "ant", "at"]
    assert [e.id for e in table.entries] == [0, 1, 2, 3, 4]
    assert [e.canonical for e in table.entries] == ["a", "aet", "aet", "ant", "at"]
    assert table[1].length == 3
    assert not table[1].solved


def test_anagram_groups_are_contiguous_ranges(make_table) -> None:
    table = make_table(["listen", "cat", "silent", "act", "enlist", "dog"])

    group = table.find_group("tinsel")
    assert group is not None
    assert group.size == 3
    assert table.words(table.group_ids(group)) == ["listen", "silent", "enlist"]
    assert table.words(table.group_ids(table.find_group("tac"))) == ["cat", "act"]
    assert table.find_group("god").size == 1
    assert table.find_group("bird") is None
    assert table.find_group("") is None


def test_every_group_indexed_once(make_table) -> None:
    words = ["a", "b", "ab", "ba", "abc", "cab", "c"]
    table = make_table(words)

    groups = table.index.groups()
    assert sum(g.size for g in groups) == len(words)
    for group in groups:
        signatures = {table[i].canonical for i in table.group_ids(group)}
        assert signatures == {group.canonical}


def test_skips_empty_and_oversized_words(make_table) -> None:
    table = make_table(["", "ok", "toolong", "fine"], max_word_len=4)

    assert sorted(e.text for e in table.entries) == ["fine", "ok"]
    assert table.skipped == 2
    assert not table.truncated


def test_duplicate_words_are_kept(make_table) -> None:
    table = make_table(["eat", "eat"])

    group = table.find_group("eat")
    assert group.size == 2
    assert [e.id for e in table.entries] == [0, 1]


def test_no_valid_words_is_fatal(make_table) -> None:
    with pytest.raises(ValueError, match="no valid words"):
        make_table(["", "x" * 300])


def test_truncation_warns_and_keeps_limit(settings) -> None:
    cfg = settings.model_copy(update={"max_dict_size": 3})
    out = io.StringIO()
    table = build_dictionary(["a", "b", "c", "d", "e"], cfg, out=out)

    assert len(table) == 3
    assert table.truncated
    assert "Warning: Dictionary size exceeds maximum limit of 3. Truncating." in out.getvalue()


def test_exactly_at_limit_does_not_warn(settings) -> None:
    cfg = settings.model_copy(update={"max_dict_size": 3})
    out = io.StringIO()
    table = build_dictionary(["a", "b", "c"], cfg, out=out)

    assert len(table) == 3
    assert out.getvalue() == ""

from datetime import datetime
import re

import pytest

from solo_quiz.core.errors import PersistenceError
from solo_quiz.core.models import LeaderboardEntry
from solo_quiz.core.services.leaderboard import (
    LeaderboardStore,
    format_leaderboard_table,
    parse_entry,
    rank_entries,
)

LINE_PATTERN = re.compile(r"^.+ - \d+/\d+ @ \d{4}-\d{2}-\d{2} \d{2}:\d{2}$")


def test_parse_entry_reads_well_formed_line():
    entry = parse_entry("Ana - 7/10 @ 2024-01-01 10:00")
    assert entry == LeaderboardEntry(name="Ana", score=7, total=10, timestamp="2024-01-01 10:00")


def test_parse_entry_allows_separator_inside_name():
    entry = parse_entry("Mary - Jane - 3/5 @ 2024-01-01 10:00")
    assert entry.name == "Mary - Jane"
    assert entry.score == 3


@pytest.mark.parametrize(
    "line",
    [
        "",
        "garbage",
        "Ana - 7/10",
        "Ana - seven/10 @ 2024-01-01 10:00",
        "Ana - 7/10 @ 2024-1-1 10:00",
        " - 7/10 @ 2024-01-01 10:00",
    ],
)
def test_parse_entry_rejects_malformed_lines(line):
    assert parse_entry(line) is None


def test_ranked_top_orders_by_score_then_timestamp(results_path):
    results_path.write_text(
        "A - 5/10 @ 2024-01-01 10:00\n"
        "B - 8/10 @ 2024-01-01 10:00\n"
        "C - 5/10 @ 2024-01-02 10:00\n",
        encoding="utf-8",
    )
    store = LeaderboardStore(results_path)

    assert [entry.name for entry in store.ranked_top(3)] == ["B", "C", "A"]


def test_ranked_top_is_idempotent(results_path):
    results_path.write_text(
        "A - 5/10 @ 2024-01-01 10:00\nB - 8/10 @ 2024-01-01 10:00\n", encoding="utf-8"
    )
    store = LeaderboardStore(results_path)

    assert store.ranked_top() == store.ranked_top()


def test_ranked_top_skips_malformed_lines(results_path):
    results_path.write_text(
        "not a result\nA - 5/10 @ 2024-01-01 10:00\n\nB - x/10 @ 2024-01-01 10:00\n",
        encoding="utf-8",
    )
    store = LeaderboardStore(results_path)

    assert [entry.name for entry in store.ranked_top()] == ["A"]


def test_ranked_top_limits_and_handles_non_positive_limit():
    entries = [
        LeaderboardEntry(name=f"P{score}", score=score, total=20, timestamp="2024-01-01 10:00")
        for score in range(15)
    ]
    assert len(rank_entries(entries)) == 10
    assert rank_entries(entries, 0) == []
    assert rank_entries(entries, -1) == []


def test_equal_entries_keep_file_order():
    first = LeaderboardEntry(name="First", score=5, total=10, timestamp="2024-01-01 10:00")
    second = LeaderboardEntry(name="Second", score=5, total=10, timestamp="2024-01-01 10:00")
    assert rank_entries([first, second]) == [first, second]


def test_missing_log_is_an_empty_leaderboard(store):
    assert store.ranked_top() == []


def test_record_result_appends_one_grammar_line(store, results_path):
    entry = store.record_result("Ana", 7, 10)

    lines = results_path.read_text(encoding="utf-8").splitlines()
    assert lines == ["Ana - 7/10 @ 2024-03-05 14:30"]
    assert LINE_PATTERN.match(lines[0])
    assert store.ranked_top() == [entry]


def test_record_result_repairs_missing_trailing_newline(store, results_path):
    results_path.write_text("Bo - 2/10 @ 2024-01-01 10:00", encoding="utf-8")

    store.record_result("Ana", 7, 10)

    assert [entry.name for entry in store.ranked_top()] == ["Ana", "Bo"]


def test_record_result_creates_parent_directories(tmp_path):
    store = LeaderboardStore(tmp_path / "nested" / "results.txt", clock=lambda: datetime(2024, 1, 1))
    store.record_result("Ana", 1, 1)
    assert (tmp_path / "nested" / "results.txt").exists()


def test_record_result_collapses_whitespace_in_name(store):
    entry = store.record_result("  Ana \n Maria ", 3, 4)
    assert entry.name == "Ana Maria"


def test_record_result_rejects_bad_input(store):
    with pytest.raises(ValueError):
        store.record_result("   ", 1, 2)
    with pytest.raises(ValueError):
        store.record_result("Ana", -1, 2)


def test_unwritable_log_raises_persistence_error(tmp_path):
    # A directory in place of the log file cannot be opened for appending.
    blocked = tmp_path / "results.txt"
    blocked.mkdir()
    store = LeaderboardStore(blocked)

    with pytest.raises(PersistenceError):
        store.record_result("Ana", 7, 10)


def test_format_leaderboard_table():
    table = format_leaderboard_table(
        [LeaderboardEntry(name="Ana", score=7, total=10, timestamp="2024-01-01 10:00")]
    )
    lines = table.splitlines()
    assert lines[0].startswith("#")
    assert "Name" in lines[0]
    assert lines[1] == "-" * 46
    assert lines[2].split() == ["1", "Ana", "7/10", "2024-01-01", "10:00"]


def test_separator_characters_in_a_line_do_not_split_entries(results_path):
    results_path.write_text(
        "Ana\x85Maria - 7/10 @ 2024-01-01 10:00\nBo - 3/10 @ 2024-01-01 10:00\n",
        encoding="utf-8",
    )
    store = LeaderboardStore(results_path)

    assert [entry.name for entry in store.ranked_top()] == ["Ana\x85Maria", "Bo"]

"""
Tests for search, ordering and rendering of records.
"""

import asyncio

import pytest

from acronify.errors import NotFoundError
from acronify.store import load_seed
from acronify.surfacing import (
    filter_records,
    format_record,
    format_records,
    get_stats,
    sort_for_display,
    toggle_favorite,
)


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def records():
    return load_seed()


def test_blank_query_keeps_everything(records):
    assert filter_records(records, "   ") == records


@pytest.mark.parametrize("query,expected", [
    ("smart", [1]),           # acronym
    ("RAINBOW", [2]),         # original text, case-insensitive
    ("growing intervals", [4]),  # summary
    ("zzz", []),
])
def test_filter_by_query(records, query, expected):
    assert [r.id for r in filter_records(records, query)] == expected


def test_filter_by_flags(records):
    assert [r.id for r in filter_records(records, favorites_only=True)] == [1, 4]
    assert [r.id for r in filter_records(records, category="science")] == [2]
    assert [r.id for r in filter_records(records, kind="summary")] == [4]


def test_sort_favorites_first_then_newest(records):
    assert [r.id for r in sort_for_display(records)] == [1, 4, 2, 3]


def test_toggle_favorite_round_trip(seeded_store):
    record = asyncio.run(toggle_favorite(seeded_store, 2))
    assert record.is_favorite is True
    assert asyncio.run(seeded_store.get_by_id(2)).is_favorite is True

    record = asyncio.run(toggle_favorite(seeded_store, "2"))
    assert record.is_favorite is False


def test_toggle_favorite_missing(seeded_store):
    with pytest.raises(NotFoundError):
        asyncio.run(toggle_favorite(seeded_store, 123))


def test_format_acronym_card(records):
    card = format_record(records[0])

    assert card.splitlines()[0] == "#1  SMART ★"
    assert "S  Specific" in card
    assert "Productivity · 2024-01-15" in card


def test_format_summary_card(records):
    card = format_record(records[3])
    assert "Summary" in card
    assert "Spaced repetition schedules reviews" in card


def test_format_records_empty():
    assert format_records([]) == "No records found."


def test_format_records_orders_cards(records):
    output = format_records(records, header="ALL")
    assert output.startswith("━━━ ALL ━━━")
    assert output.index("#1 ") < output.index("#4 ") < output.index("#2 ")


def test_stats(records):
    stats = get_stats(records)
    assert stats["total_records"] == 4
    assert stats["by_kind"] == {"acronym": 3, "summary": 1}
    assert stats["favorites"] == 2
    assert set(stats["by_category"]) == {"Productivity", "Science", "Leadership", "Learning"}

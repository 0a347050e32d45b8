"""
Tests for the SQLite slot database.
"""

from acronify.db import Database


def test_missing_slot_is_none(db):
    assert db.get_item("acronify_data") is None


def test_set_overwrites_whole_slot(db):
    db.set_item("acronify_data", "[1, 2]")
    db.set_item("acronify_data", "[]")
    assert db.get_item("acronify_data") == "[]"


def test_slots_survive_reopen(tmp_path):
    path = tmp_path / "nested" / "acronify.db"
    Database(path).set_item("notes", '{"a": 1}')
    assert Database(path).get_item("notes") == '{"a": 1}'


def test_stats(db):
    db.set_item("a", "12345")
    db.set_item("b", "")

    stats = db.get_stats()

    assert stats["total_slots"] == 2
    assert stats["slots"]["a"]["size"] == 5
    assert stats["slots"]["b"]["size"] == 0

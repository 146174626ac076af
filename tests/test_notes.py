"""Tests for the in-memory note store."""

import pytest

from demo_server.errors import NoteNotFoundError
from demo_server.notes import NoteStore


def test_ids_start_at_one_and_increase(store):
    first = store.create("A", "alpha")
    second = store.create("B", "beta")
    assert first.id == 1
    assert second.id == 2


def test_all_preserves_insertion_order(store):
    for title in ("one", "two", "three"):
        store.create(title, "")
    assert [note.title for note in store.all()] == ["one", "two", "three"]
    assert len(store) == 3


def test_get_returns_stored_note(store):
    note = store.create("Title", "Body")
    fetched = store.get(note.id)
    assert fetched.title == "Title"
    assert fetched.content == "Body"
    assert fetched.created == "2025-01-01T00:00:00+00:00"


def test_get_missing_note_raises(store):
    with pytest.raises(NoteNotFoundError, match="Note not found: 999999"):
        store.get(999999)


def test_default_clock_is_iso8601():
    from datetime import datetime

    note = NoteStore().create("t", "c")
    assert datetime.fromisoformat(note.created).tzinfo is not None


def test_empty_store():
    store = NoteStore()
    assert len(store) == 0
    assert store.all() == []

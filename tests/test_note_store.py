"""
QuickNote Backend: Note Store Contract Tests
===============================================

What:  The same contract tests run against InMemoryNoteStore and
       SqlAlchemyNoteStore (in-memory SQLite via aiosqlite).

What we test:
    ✅ create assigns id and timestamps
    ✅ find_all / find_by_id / update / delete round the stored data
    ✅ Unknown ids return None from find_by_id, update and delete
    ✅ update refreshes updated_at; timestamps read back in UTC
"""

from datetime import timedelta
from uuid import uuid4

import pytest


@pytest.fixture(params=["memory", "sql"])
def store(request, memory_store, sql_store):
    """Each test below runs once per store implementation."""
    return memory_store if request.param == "memory" else sql_store


class TestNoteStoreContract:

    @pytest.mark.asyncio
    async def test_create_assigns_identity_and_timestamps(self, store):
        note = await store.create("Title", "Content")

        assert note.id is not None
        assert note.title == "Title"
        assert note.content == "Content"
        assert note.created_at is not None
        assert note.updated_at is not None

    @pytest.mark.asyncio
    async def test_create_assigns_distinct_ids(self, store):
        first = await store.create("One", "1")
        second = await store.create("Two", "2")

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_find_all_empty(self, store):
        assert await store.find_all() == []

    @pytest.mark.asyncio
    async def test_find_all_returns_every_note(self, store):
        created = [await store.create(f"Note {i}", f"Content {i}") for i in range(3)]

        notes = await store.find_all()

        assert {n.id for n in notes} == {n.id for n in created}

    @pytest.mark.asyncio
    async def test_find_by_id(self, store):
        created = await store.create("Title", "Content")

        found = await store.find_by_id(created.id)

        assert found is not None
        assert found.id == created.id
        assert found.title == "Title"

    @pytest.mark.asyncio
    async def test_find_by_id_unknown(self, store):
        assert await store.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_update_replaces_title_and_content(self, store):
        created = await store.create("Old", "Old content")

        updated = await store.update(created.id, "New", "New content")

        assert updated is not None
        assert updated.id == created.id
        assert updated.title == "New"
        assert updated.content == "New content"

        reread = await store.find_by_id(created.id)
        assert reread.title == "New"
        assert reread.content == "New content"

    @pytest.mark.asyncio
    async def test_update_unknown_writes_nothing(self, store):
        existing = await store.create("Keep", "Keep content")

        assert await store.update(uuid4(), "New", "New content") is None

        notes = await store.find_all()
        assert len(notes) == 1
        assert notes[0].id == existing.id
        assert notes[0].title == "Keep"

    @pytest.mark.asyncio
    async def test_update_refreshes_updated_at_only(self, store):
        created = await store.create("Title", "Content")

        updated = await store.update(created.id, "New", "New content")
        reread = await store.find_by_id(created.id)

        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at
        assert reread.updated_at == updated.updated_at

    @pytest.mark.asyncio
    async def test_timestamps_are_utc_on_every_read(self, store):
        created = await store.create("Title", "Content")

        reread = await store.find_by_id(created.id)
        listed = (await store.find_all())[0]

        for note in (created, reread, listed):
            assert note.created_at.utcoffset() == timedelta(0)
            assert note.updated_at.utcoffset() == timedelta(0)
        assert reread.created_at == created.created_at
        assert reread.model_dump_json() == created.model_dump_json()

    @pytest.mark.asyncio
    async def test_delete_returns_removed_note(self, store):
        created = await store.create("Title", "Content")

        deleted = await store.delete(created.id)

        assert deleted is not None
        assert deleted.id == created.id
        assert deleted.title == "Title"
        assert await store.find_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown(self, store):
        assert await store.delete(uuid4()) is None


class TestInMemoryNoteStore:
    """Behavior specific to the in-memory implementation."""

    @pytest.mark.asyncio
    async def test_returned_records_are_snapshots(self, memory_store):
        created = await memory_store.create("Title", "Content")
        created.title = "mutated outside the store"

        stored = await memory_store.find_by_id(created.id)

        assert stored.title == "Title"

    @pytest.mark.asyncio
    async def test_find_all_newest_first(self, memory_store):
        ids = [(await memory_store.create(f"Note {i}", "c")).id for i in range(3)]

        notes = await memory_store.find_all()

        assert [n.id for n in notes] == list(reversed(ids))

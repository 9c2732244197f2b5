"""
QuickNote Backend: Note Service Unit Tests
=============================================

What:  Tests for NoteService (create, list, get, update, delete).
How:   Uses the in-memory store and a failing mock store (no real DB).

What we test:
    ✅ Validated, normalized input reaches the store
    ✅ Invalid input never reaches the store
    ✅ None from the store becomes NotFoundError
    ✅ Store exceptions become DatabaseError with operation-specific messages
"""

from uuid import uuid4

import pytest

from quicknote.exceptions import DatabaseError, NotFoundError, ValidationError
from quicknote.services.note_service import NoteService


class TestCreateNote:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_create_note_success(self, memory_store, limits):
        """Store receives trimmed, sanitized values and assigns the id."""
        note = await self.service.create_note(
            memory_store, "  My <i>Note</i> ", "Note content here", limits
        )

        assert note.title == "My Note"
        assert note.content == "Note content here"
        assert note.id is not None
        assert len(memory_store) == 1

    @pytest.mark.asyncio
    async def test_create_note_validation_skips_store(self, failing_store, limits):
        """Validation failures are raised before the store is called."""
        with pytest.raises(ValidationError, match="Content cannot be empty"):
            await self.service.create_note(failing_store, "Title", "   ", limits)

        failing_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_note_store_failure(self, failing_store, limits):
        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_note(failing_store, "Title", "Content", limits)

        assert exc_info.value.message == "Failed to create note"
        # Driver detail stays in context, out of the message
        assert "connection" not in exc_info.value.message
        assert exc_info.value.context["error_type"] == "ConnectionError"


class TestReadNotes:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_get_all_notes_empty(self, memory_store):
        assert await self.service.get_all_notes(memory_store) == []

    @pytest.mark.asyncio
    async def test_get_all_notes_newest_first(self, memory_store, limits):
        first = await self.service.create_note(memory_store, "First", "1", limits)
        second = await self.service.create_note(memory_store, "Second", "2", limits)

        notes = await self.service.get_all_notes(memory_store)

        assert [n.id for n in notes] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_get_all_notes_store_failure(self, failing_store):
        with pytest.raises(DatabaseError, match="Failed to fetch notes"):
            await self.service.get_all_notes(failing_store)

    @pytest.mark.asyncio
    async def test_get_note_by_id_found(self, memory_store, limits):
        created = await self.service.create_note(memory_store, "Title", "Content", limits)

        note = await self.service.get_note_by_id(memory_store, created.id)

        assert note == created

    @pytest.mark.asyncio
    async def test_get_note_by_id_not_found(self, memory_store):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_note_by_id(memory_store, uuid4())

        assert exc_info.value.message == "Note not found"

    @pytest.mark.asyncio
    async def test_get_note_by_id_store_failure(self, failing_store):
        with pytest.raises(DatabaseError, match="Failed to fetch note"):
            await self.service.get_note_by_id(failing_store, uuid4())


class TestUpdateNote:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_update_note_success(self, memory_store, limits):
        created = await self.service.create_note(memory_store, "Old", "Old content", limits)

        updated = await self.service.update_note(
            memory_store, created.id, " New ", "<b>New</b> content", limits
        )

        assert updated.id == created.id
        assert updated.title == "New"
        assert updated.content == "New content"
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_update_note_not_found(self, memory_store, limits):
        with pytest.raises(NotFoundError):
            await self.service.update_note(memory_store, uuid4(), "Title", "Content", limits)

        assert len(memory_store) == 0

    @pytest.mark.asyncio
    async def test_update_note_invalid_leaves_note_unchanged(self, memory_store, limits):
        created = await self.service.create_note(memory_store, "Keep", "Keep content", limits)

        with pytest.raises(ValidationError, match="Title cannot be empty"):
            await self.service.update_note(memory_store, created.id, "   ", "New", limits)

        stored = await memory_store.find_by_id(created.id)
        assert stored.title == "Keep"

    @pytest.mark.asyncio
    async def test_update_note_store_failure(self, failing_store, limits):
        with pytest.raises(DatabaseError, match="Failed to update note"):
            await self.service.update_note(failing_store, uuid4(), "Title", "Content", limits)


class TestDeleteNote:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_delete_note_success(self, memory_store, limits):
        created = await self.service.create_note(memory_store, "Title", "Content", limits)

        result = await self.service.delete_note(memory_store, created.id)

        assert result.message == "Note deleted successfully"
        assert result.note.id == created.id
        assert len(memory_store) == 0

    @pytest.mark.asyncio
    async def test_delete_note_not_found(self, memory_store):
        with pytest.raises(NotFoundError):
            await self.service.delete_note(memory_store, uuid4())

    @pytest.mark.asyncio
    async def test_delete_note_store_failure(self, failing_store):
        with pytest.raises(DatabaseError, match="Failed to delete note"):
            await self.service.delete_note(failing_store, uuid4())

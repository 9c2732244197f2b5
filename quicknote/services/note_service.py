"""
QuickNote Backend: Note Service (Request Handlers)
=====================================================

What:  Sequences every note operation: validate → call the store → outcome.
How:   Validation runs first and raises ValidationError before any store call.
       Store results are mapped to outcomes:
           record        → returned to the route (200/201)
           None          → NotFoundError (404)
           any exception → logged, re-raised as DatabaseError (500) with a
                           generic operation-specific message
Who:   Called by the route handlers in quicknote/routes/notes.py.

Flow (POST /api/notes, PUT /api/notes/{id}):
    ┌──────────┐    ┌──────────────┐    ┌──────────┐    ┌──────────┐
    │  Route   │───▶│  Validation  │───▶│  Store   │───▶│ Outcome  │
    └──────────┘    │  Pipeline    │    │  (CRUD)  │    └──────────┘
                    └──────────────┘    └──────────┘

NoteService is stateless; the store and limits are passed into every call.
"""

import logging
from typing import List, Optional
from uuid import UUID

from quicknote.exceptions import DatabaseError, NotFoundError
from quicknote.schemas.note import NoteDeletedResponse, NoteRecord
from quicknote.services.note_store import NoteStore
from quicknote.services.validation import ValidationLimits, validate_and_normalize

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        ValidationError is raised by the pipeline before the store is touched.
        Absence (store returned None) becomes NotFoundError.
        Every store exception becomes DatabaseError; the cause is logged with
        its traceback and kept out of the response.
    """

    async def create_note(
        self,
        store: NoteStore,
        title: Optional[str],
        content: Optional[str],
        limits: ValidationLimits,
    ) -> NoteRecord:
        """
        Validate and persist a new note.

        Raises:
            ValidationError: Input rejected by the pipeline (→ 400)
            DatabaseError:   Store failed (→ 500, "Failed to create note")
        """
        normalized = validate_and_normalize(title, content, limits)

        try:
            note = await store.create(normalized.title, normalized.content)
        except Exception as e:
            logger.error("Error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create note",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Note %s created", note.id)
        return note

    async def get_all_notes(self, store: NoteStore) -> List[NoteRecord]:
        """Return every note, newest first (possibly empty)."""
        try:
            return await store.find_all()
        except Exception as e:
            logger.error("Error fetching notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch notes",
                context={"error_type": type(e).__name__},
            ) from e

    async def get_note_by_id(self, store: NoteStore, note_id: UUID) -> NoteRecord:
        """
        Retrieve a single note.

        Raises:
            NotFoundError: No note has this id (→ 404)
            DatabaseError: Store failed (→ 500, "Failed to fetch note")
        """
        try:
            note = await store.find_by_id(note_id)
        except Exception as e:
            logger.error("Error fetching note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch note",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            ) from e

        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))
        return note

    async def update_note(
        self,
        store: NoteStore,
        note_id: UUID,
        title: Optional[str],
        content: Optional[str],
        limits: ValidationLimits,
    ) -> NoteRecord:
        """
        Validate and fully replace title and content of an existing note.

        Raises:
            ValidationError: Input rejected by the pipeline (→ 400, store untouched)
            NotFoundError:   No note has this id (→ 404)
            DatabaseError:   Store failed (→ 500, "Failed to update note")
        """
        normalized = validate_and_normalize(title, content, limits)

        try:
            note = await store.update(note_id, normalized.title, normalized.content)
        except Exception as e:
            logger.error("Error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to update note",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            ) from e

        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))

        logger.info("Note %s updated", note.id)
        return note

    async def delete_note(self, store: NoteStore, note_id: UUID) -> NoteDeletedResponse:
        """
        Delete a note and return it alongside a confirmation message.

        Raises:
            NotFoundError: No note has this id (→ 404)
            DatabaseError: Store failed (→ 500, "Failed to delete note")
        """
        try:
            note = await store.delete(note_id)
        except Exception as e:
            logger.error("Error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to delete note",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            ) from e

        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))

        logger.info("Note %s deleted", note.id)
        return NoteDeletedResponse(message="Note deleted successfully", note=note)


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()

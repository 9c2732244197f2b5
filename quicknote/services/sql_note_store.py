"""
QuickNote Backend: SQLAlchemy Note Store
===========================================

What:  NoteStore implementation over the `notes` table.
How:   Opens one AsyncSession per operation from the pooled session factory
       and wraps every write in its own transaction (`session.begin()`).
       ORM rows are converted to NoteRecord snapshots before returning.
Who:   Default store injected into routes by `get_note_store`.

Query plans:
    find_all():   SELECT ... ORDER BY created_at DESC  (idx_notes_created_at)
    find_by_id(): SELECT ... WHERE id = :uuid          (primary key)
    update():     SELECT by primary key, then UPDATE of the same row
    delete():     SELECT by primary key, then DELETE of the same row
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quicknote.models.note import Note, utc_now
from quicknote.schemas.note import NoteRecord
from quicknote.services.note_store import NoteStore

logger = logging.getLogger(__name__)


class SqlAlchemyNoteStore(NoteStore):
    """
    Relational note store.

    Errors from the driver (connection lost, constraint violation, ...)
    propagate unchanged; NoteService turns them into DatabaseError.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create(self, title: str, content: str) -> NoteRecord:
        async with self._session_factory() as session:
            async with session.begin():
                note = Note(title=title, content=content)
                session.add(note)
                # Assigns id and timestamps before the commit
                await session.flush()
            logger.debug("Note record created: %s", note.id)
            return NoteRecord.model_validate(note)

    async def find_all(self) -> List[NoteRecord]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(Note).order_by(desc(Note.created_at))
            )
            return [NoteRecord.model_validate(note) for note in result.scalars().all()]

    async def find_by_id(self, note_id: UUID) -> Optional[NoteRecord]:
        async with self._session_factory() as session:
            note = await session.get(Note, note_id)
            if note is None:
                return None
            return NoteRecord.model_validate(note)

    async def update(self, note_id: UUID, title: str, content: str) -> Optional[NoteRecord]:
        async with self._session_factory() as session:
            async with session.begin():
                note = await session.get(Note, note_id)
                if note is None:
                    return None
                note.title = title
                note.content = content
                note.updated_at = utc_now()
                await session.flush()
            logger.debug("Note %s updated", note_id)
            return NoteRecord.model_validate(note)

    async def delete(self, note_id: UUID) -> Optional[NoteRecord]:
        async with self._session_factory() as session:
            async with session.begin():
                note = await session.get(Note, note_id)
                if note is None:
                    return None
                # Snapshot before the row disappears
                record = NoteRecord.model_validate(note)
                await session.delete(note)
            logger.debug("Note %s deleted", note_id)
            return record

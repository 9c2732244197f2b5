"""
QuickNote Backend: In-Memory Note Store
==========================================

What:  Dict-backed NoteStore with the same contract as SqlAlchemyNoteStore.
Who:   Injected by the test suite through FastAPI dependency overrides;
       also handy for running the API without a database.

Not shared between processes and not persistent. Operations contain no
awaits, so each one runs to completion on the event loop without locking.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import UUID

from quicknote.schemas.note import NoteRecord
from quicknote.services.note_store import NoteStore


class InMemoryNoteStore(NoteStore):

    def __init__(self) -> None:
        self._notes: Dict[UUID, NoteRecord] = {}

    def __len__(self) -> int:
        return len(self._notes)

    async def create(self, title: str, content: str) -> NoteRecord:
        now = datetime.now(timezone.utc)
        note = NoteRecord(
            id=uuid.uuid4(),
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self._notes[note.id] = note
        return note.model_copy()

    async def find_all(self) -> List[NoteRecord]:
        # Newest insertion first, so ties on created_at keep newest-first order
        newest_first = list(reversed(list(self._notes.values())))
        newest_first.sort(key=lambda note: note.created_at, reverse=True)
        return [note.model_copy() for note in newest_first]

    async def find_by_id(self, note_id: UUID) -> Optional[NoteRecord]:
        note = self._notes.get(note_id)
        return note.model_copy() if note else None

    async def update(self, note_id: UUID, title: str, content: str) -> Optional[NoteRecord]:
        note = self._notes.get(note_id)
        if note is None:
            return None
        updated = note.model_copy(
            update={
                "title": title,
                "content": content,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._notes[note_id] = updated
        return updated.model_copy()

    async def delete(self, note_id: UUID) -> Optional[NoteRecord]:
        return self._notes.pop(note_id, None)

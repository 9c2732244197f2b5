"""
QuickNote Backend: Abstract Note Store Interface
===================================================

What:  Abstract base class defining the persistence contract for notes.
How:   Concrete stores inherit from NoteStore and implement the five CRUD
       primitives. NoteService only ever talks to this interface.
Who:   Called by NoteService; provided to routes by the `get_note_store`
       dependency.

Implementations:
    - SqlAlchemyNoteStore: async SQLAlchemy over the `notes` table (default)
    - InMemoryNoteStore:   dict-backed store for tests and local experiments

Absence Contract:
    find_by_id(), update() and delete() return None when no note has the
    given id. They never raise for a missing note. Anything a store DOES
    raise is treated by NoteService as a store failure (HTTP 500).
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from quicknote.schemas.note import NoteRecord


class NoteStore(ABC):
    """
    Persistence capability over notes keyed by an opaque UUID.

    Contract:
        - The store alone assigns ids and created_at/updated_at timestamps
        - Inputs are already validated and normalized by the caller
        - Each create/update/delete is atomic on its own
        - Returned records are snapshots; mutating them does not touch storage
    """

    @abstractmethod
    async def create(self, title: str, content: str) -> NoteRecord:
        """Persist a new note and return it with its assigned id and timestamps."""
        ...

    @abstractmethod
    async def find_all(self) -> List[NoteRecord]:
        """Return every note, newest first. Empty list when there are none."""
        ...

    @abstractmethod
    async def find_by_id(self, note_id: UUID) -> Optional[NoteRecord]:
        """Return the note with this id, or None."""
        ...

    @abstractmethod
    async def update(self, note_id: UUID, title: str, content: str) -> Optional[NoteRecord]:
        """
        Replace title and content of an existing note.

        Returns:
            The updated note with a refreshed updated_at, or None when no
            note has this id (nothing is written in that case).
        """
        ...

    @abstractmethod
    async def delete(self, note_id: UUID) -> Optional[NoteRecord]:
        """Remove the note and return it as it was, or None if it did not exist."""
        ...

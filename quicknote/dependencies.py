"""
QuickNote Backend: FastAPI Dependencies
==========================================

What:  Providers for the note store and validation limits used by the routes.
How:   Routes declare `Depends(get_note_store)` / `Depends(get_validation_limits)`.
       Tests swap either one with `app.dependency_overrides`.
"""

from functools import lru_cache

from quicknote.config import settings
from quicknote.database import async_session_factory
from quicknote.services.note_store import NoteStore
from quicknote.services.sql_note_store import SqlAlchemyNoteStore
from quicknote.services.validation import ValidationLimits


@lru_cache(maxsize=1)
def get_note_store() -> NoteStore:
    """The process-wide SQL store. Sessions are opened per operation."""
    return SqlAlchemyNoteStore(async_session_factory)


def get_validation_limits() -> ValidationLimits:
    """Limits from configuration, resolved per request."""
    return settings.validation_limits

"""
QuickNote Backend: Notes Route Handlers
==========================================

What:  CRUD endpoints for the `notes` resource under /api.
How:   Extracts path/body data, delegates to NoteService, returns records.
       Errors raised by the service are rendered by the global exception
       handlers in main.py as `{"error": "<message>"}`.

Endpoints:
    POST   /api/notes        → 201 created note
    GET    /api/notes        → 200 list of notes (newest first)
    GET    /api/notes/{id}   → 200 note | 404
    PUT    /api/notes/{id}   → 200 updated note | 400 | 404
    DELETE /api/notes/{id}   → 200 {message, note} | 404
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from quicknote.dependencies import get_note_store, get_validation_limits
from quicknote.schemas.note import (
    ErrorResponse,
    NoteDeletedResponse,
    NotePayload,
    NoteRecord,
)
from quicknote.services.note_service import note_service
from quicknote.services.note_store import NoteStore
from quicknote.services.validation import ValidationLimits

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


def _payload_or_empty(payload: Optional[NotePayload]) -> NotePayload:
    # A missing body reads as "both fields missing"
    return payload if payload is not None else NotePayload()


@router.post(
    "/notes",
    response_model=NoteRecord,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Validation failed", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: Optional[NotePayload] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
    limits: ValidationLimits = Depends(get_validation_limits),
) -> NoteRecord:
    body = _payload_or_empty(payload)
    return await note_service.create_note(store, body.title, body.content, limits)


@router.get(
    "/notes",
    response_model=List[NoteRecord],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all notes, newest first",
)
async def get_all_notes(
    store: NoteStore = Depends(get_note_store),
) -> List[NoteRecord]:
    return await note_service.get_all_notes(store)


@router.get(
    "/notes/{note_id}",
    response_model=NoteRecord,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note_by_id(
    note_id: UUID,
    store: NoteStore = Depends(get_note_store),
) -> NoteRecord:
    """
    Args:
        note_id: UUID path parameter. A malformed id never reaches the store
                 and is answered as 404 "Note not found".
    """
    return await note_service.get_note_by_id(store, note_id)


@router.put(
    "/notes/{note_id}",
    response_model=NoteRecord,
    responses={
        400: {"description": "Validation failed", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Replace title and content of a note",
)
async def update_note(
    note_id: UUID,
    payload: Optional[NotePayload] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
    limits: ValidationLimits = Depends(get_validation_limits),
) -> NoteRecord:
    body = _payload_or_empty(payload)
    return await note_service.update_note(store, note_id, body.title, body.content, limits)


@router.delete(
    "/notes/{note_id}",
    response_model=NoteDeletedResponse,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: UUID,
    store: NoteStore = Depends(get_note_store),
) -> NoteDeletedResponse:
    return await note_service.delete_note(store, note_id)

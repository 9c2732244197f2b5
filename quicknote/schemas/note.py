"""
QuickNote Backend: Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between clients and backend.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation.

Wire format:
    Records are serialized with camelCase keys:
        {"id": "...", "title": "...", "content": "...",
         "createdAt": "...", "updatedAt": "..."}
    snake_case names are accepted when parsing (populate_by_name).
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ══════════════════════════════════════════════════════════════════════════
# Request Models: What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NotePayload(BaseModel):
    """
    What:  Body of POST /api/notes and PUT /api/notes/{id}.

    Both fields are optional at the schema level: absence is reported by the
    validation pipeline ("Title and content are required"), not by FastAPI,
    so clients get the same error contract for a missing field and an
    empty string.
    """
    title: Optional[str] = Field(default=None, description="Note title (1-255 chars after trim)")
    content: Optional[str] = Field(default=None, description="Note body (non-empty after trim)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models: What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteRecord(BaseModel):
    """
    What:  Full representation of a stored note.
    Who:   Returned by every NoteStore method and by the create/get/update routes.
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str = Field(description="Trimmed, tag-stripped title")
    content: str = Field(description="Trimmed, tag-stripped content")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last updated (UTC ISO 8601)")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        """
        SQLite hands back naive datetimes; PostgreSQL returns them in the
        session time zone. Both are pinned to UTC so a note serializes the
        same way whichever call produced it.
        """
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class NoteDeletedResponse(BaseModel):
    """Returned by DELETE /api/notes/{id}: confirmation plus the removed note."""
    message: str = Field(
        default="Note deleted successfully",
        description="Human-readable confirmation"
    )
    note: NoteRecord = Field(description="The note as it was before deletion")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every endpoint.

    Example:
        {"error": "Content cannot be empty"}
    """
    error: str = Field(description="Human-readable error message")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: ok or degraded")
    message: str = Field(description="Human-readable status line")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

"""
QuickNote Backend: Note SQLAlchemy Model
===========================================

What:  ORM model representing the `notes` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SqlAlchemyNoteStore for CRUD operations and by Alembic.

Table Design:
    - id:         UUID primary key, generated by the application on insert
    - title:      VARCHAR(255), matches the default title length limit
    - content:    TEXT, bounded by the configured content limit
    - created_at: UTC with timezone, set once on insert
    - updated_at: UTC with timezone, refreshed by every update

    Index on created_at DESC serves the list query (newest first).

    Column types are the generic SQLAlchemy ones (Uuid, DateTime) so the same
    model runs on PostgreSQL in production and SQLite in tests.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from quicknote.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A user note as persisted in the database.

    Lifecycle:
        1. Inserted by a validated create (id, created_at, updated_at assigned)
        2. Title and content replaced together by a validated update
        3. Removed by delete
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier, assigned on insert and never changed",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Trimmed, tag-stripped note title",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Trimmed, tag-stripped note body",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # All storage in UTC; conversion to local time happens in the client
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was last updated (UTC)",
    )

    # ── Indexes ───────────────────────────────────────────────────────────
    __table_args__ = (
        Index("idx_notes_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Note(id={self.id}, title='{self.title[:20]}', created_at='{self.created_at}')>"

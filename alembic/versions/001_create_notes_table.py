"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `notes` table: id, title, content, created_at, updated_at.
How:   Generic column types (Uuid, DateTime with timezone) so the migration
       applies to PostgreSQL and SQLite alike.

Rollback: downgrade() drops the table entirely (destructive: all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the notes table and its created_at index (see quicknote/models/note.py)."""
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Unique identifier, assigned on insert and never changed",
        ),
        sa.Column(
            "title",
            sa.String(255),
            nullable=False,
            comment="Trimmed, tag-stripped note title",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="Trimmed, tag-stripped note body",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was last updated (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Serves the list query: ORDER BY created_at DESC
    op.create_index(
        "idx_notes_created_at",
        "notes",
        [sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Drop the notes table. All note data is permanently lost."""
    op.drop_index("idx_notes_created_at", table_name="notes")
    op.drop_table("notes")

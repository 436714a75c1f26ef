"""Create folders and notes tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `folders` and `notes`, with notes.folder_id referencing
       folders.id ON DELETE CASCADE.

Rollback: downgrade() drops both tables (destructive, all data lost).
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
    """Create folders first; notes references it. See noteful/models/ for column docs."""
    op.create_table(
        "folders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "folder_name",
            sa.Text(),
            nullable=False,
            comment="Display name of the folder (HTML-escaped)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "note_name",
            sa.Text(),
            nullable=False,
            comment="Title of the note (HTML-escaped)",
        ),
        sa.Column(
            "note_content",
            sa.Text(),
            nullable=False,
            comment="Body of the note (allow-listed inline markup only)",
        ),
        sa.Column(
            "folder_id",
            sa.Integer(),
            nullable=True,
            comment="Owning folder",
        ),
        sa.Column(
            "modified",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="Creation time, refreshed on every update (UTC)",
        ),
        sa.ForeignKeyConstraint(
            ["folder_id"],
            ["folders.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_notes_folder_id", "notes", ["folder_id"])


def downgrade() -> None:
    op.drop_index("idx_notes_folder_id", table_name="notes")
    op.drop_table("notes")
    op.drop_table("folders")

"""
Noteful Backend — Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteRepository for CRUD statements and by Alembic for schema management.

Table Design Rationale:
    - Integer primary key: Sequential ids, exposed in URLs (/api/notes/3)
    - note_name / note_content: TEXT, stored already sanitized
    - folder_id: REFERENCES folders(id) ON DELETE CASCADE
        Nullable at the schema level so rows written straight into the table
        without a folder stay readable; the API itself always requires one.
    - modified: UTC with timezone; set on insert, refreshed on every PATCH
"""

from datetime import datetime, timezone
from typing import Optional, TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import TIMESTAMP

from noteful.database import Base

if TYPE_CHECKING:
    from noteful.models.folder import Folder


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    Content entity belonging to a folder.

    Lifecycle:
        1. Created via POST (server assigns id and modified)
        2. Mutated via PATCH (supplied fields only, modified refreshed)
        3. Removed via DELETE, or together with its folder
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    note_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Title of the note (HTML-escaped)",
    )

    note_content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Body of the note (allow-listed inline markup only)",
    )

    folder_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=True,
        comment="Owning folder",
    )

    # Why TIMESTAMP WITH TIME ZONE: unambiguous across servers and clients
    modified: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Creation time, refreshed on every update (UTC)",
    )

    folder: Mapped[Optional["Folder"]] = relationship(back_populates="notes")

    # Lookups of a folder's notes and the cascade both scan by folder_id
    __table_args__ = (
        Index("idx_notes_folder_id", "folder_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"modified='{self.modified}')>"
        )

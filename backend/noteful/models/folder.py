"""
Noteful Backend — Folder SQLAlchemy Model
===========================================

What:  ORM model representing the `folders` table.
Who:   Used by FolderRepository for CRUD statements and by Alembic for schema management.

Table Design:
    - Integer primary key: Sequential ids, exposed in URLs (/api/folders/3)
    - folder_name: TEXT NOT NULL, stored already sanitized
    - notes relationship: ON DELETE CASCADE on the notes side, so removing
      a folder removes its notes in the database itself
"""

from typing import List, TYPE_CHECKING

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from noteful.database import Base

if TYPE_CHECKING:
    from noteful.models.note import Note


class Folder(Base):
    """Top-level grouping entity; every note belongs to exactly one folder."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    folder_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Display name of the folder (HTML-escaped)",
    )

    # passive_deletes: let the database cascade instead of loading notes first
    notes: Mapped[List["Note"]] = relationship(
        back_populates="folder",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, folder_name='{self.folder_name}')>"

"""
Noteful Backend — Persistence Adapters
========================================

What:  One repository per table, translating service calls into SQL.
How:   Stateless objects; every method takes the request's AsyncSession,
       so connection lifecycle stays with the `get_db_session` dependency.

Repository Inventory:
    - FolderRepository: select/insert/update/delete on `folders`
    - NoteRepository:   select/insert/update/delete on `notes`

Repositories let SQLAlchemy exceptions propagate; services wrap them.
"""

from noteful.repositories.folder_repository import FolderRepository, folder_repository
from noteful.repositories.note_repository import NoteRepository, note_repository

__all__ = [
    "FolderRepository",
    "NoteRepository",
    "folder_repository",
    "note_repository",
]

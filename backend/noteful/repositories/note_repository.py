"""
Noteful Backend — Note Repository
===================================

Query plans:
    all:     SELECT * FROM notes ORDER BY id
    get:     SELECT * FROM notes WHERE id = :id
    insert:  INSERT INTO notes (...) VALUES (...) RETURNING id
             (a folder_id without a matching folder raises IntegrityError)
    update:  UPDATE notes SET ... WHERE id = :id
    delete:  DELETE FROM notes WHERE id = :id
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.note import Note


class NoteRepository:

    async def all(self, db: AsyncSession) -> List[Note]:
        result = await db.execute(select(Note).order_by(Note.id))
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, note_id: int) -> Optional[Note]:
        result = await db.execute(select(Note).where(Note.id == note_id))
        return result.scalar_one_or_none()

    async def insert(self, db: AsyncSession, values: Dict[str, Any]) -> Note:
        note = Note(**values)
        db.add(note)
        await db.flush()
        return note

    async def update(self, db: AsyncSession, note_id: int, values: Dict[str, Any]) -> int:
        result = await db.execute(
            update(Note)
            .where(Note.id == note_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    async def delete(self, db: AsyncSession, note_id: int) -> int:
        result = await db.execute(
            delete(Note)
            .where(Note.id == note_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount


note_repository = NoteRepository()

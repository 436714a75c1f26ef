"""
Noteful Backend — Folder Repository
=====================================

Query plans:
    all:     SELECT * FROM folders ORDER BY id
    get:     SELECT * FROM folders WHERE id = :id      (primary key lookup)
    insert:  INSERT INTO folders (folder_name) VALUES (...) RETURNING id
    update:  UPDATE folders SET ... WHERE id = :id
    delete:  DELETE FROM folders WHERE id = :id        (notes cascade)
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.folder import Folder


class FolderRepository:

    async def all(self, db: AsyncSession) -> List[Folder]:
        result = await db.execute(select(Folder).order_by(Folder.id))
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, folder_id: int) -> Optional[Folder]:
        result = await db.execute(select(Folder).where(Folder.id == folder_id))
        return result.scalar_one_or_none()

    async def insert(self, db: AsyncSession, values: Dict[str, Any]) -> Folder:
        folder = Folder(**values)
        db.add(folder)
        # Flush assigns the id without committing; commit happens in get_db_session
        await db.flush()
        return folder

    async def update(self, db: AsyncSession, folder_id: int, values: Dict[str, Any]) -> int:
        result = await db.execute(
            update(Folder)
            .where(Folder.id == folder_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    async def delete(self, db: AsyncSession, folder_id: int) -> int:
        result = await db.execute(
            delete(Folder)
            .where(Folder.id == folder_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount


folder_repository = FolderRepository()

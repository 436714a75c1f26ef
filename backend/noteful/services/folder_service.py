"""
Noteful Backend — Folder Service
==================================

What:  Business rules for the folders resource.
How:   Validation → sanitization → FolderRepository → sanitized response.
Who:   Called by the /api/folders route handlers.

Error Handling Strategy:
    - Unknown id              → NotFoundError("Folder doesn't exist")  (404)
    - Missing folder_name     → ValidationError                          (400)
    - SQLAlchemy failure      → DatabaseError (details logged only)      (500)
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DatabaseError, NotFoundError
from noteful.models.folder import Folder
from noteful.repositories import folder_repository
from noteful.schemas.folder import FolderResponse
from noteful.services.sanitizer import sanitize_text
from noteful.services.validation import require_any_field, require_fields

logger = logging.getLogger(__name__)

FOLDER_REQUIRED_FIELDS = ("folder_name",)
FOLDER_PATCHABLE_FIELDS = ("folder_name",)
FOLDER_PATCH_MESSAGE = "Request body must contain 'folder_name'"


def serialize_folder(folder: Folder) -> FolderResponse:
    """Read path: the name is sanitized again before it leaves the server."""
    return FolderResponse(id=folder.id, folder_name=sanitize_text(folder.folder_name))


class FolderService:
    """
    Stateless; the AsyncSession is passed in on every call.

    Responsibilities:
        - list_folders / get_folder: reads
        - create_folder / update_folder / delete_folder: writes
    """

    async def list_folders(self, db: AsyncSession) -> List[FolderResponse]:
        try:
            folders = await folder_repository.all(db)
        except SQLAlchemyError as e:
            logger.error("Database error listing folders: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve folders.",
                context={"error_type": type(e).__name__},
            )
        return [serialize_folder(folder) for folder in folders]

    async def get_folder(self, db: AsyncSession, folder_id: int) -> FolderResponse:
        folder = await self._get_or_404(db, folder_id)
        return serialize_folder(folder)

    async def create_folder(self, db: AsyncSession, payload: Dict[str, Any]) -> FolderResponse:
        """
        Validate, sanitize and insert a new folder.

        Raises:
            ValidationError: folder_name missing or empty (→ 400)
            DatabaseError: insert failed (→ 500)
        """
        require_fields(payload, FOLDER_REQUIRED_FIELDS)
        values = {"folder_name": sanitize_text(payload["folder_name"])}

        try:
            folder = await folder_repository.insert(db, values)
        except SQLAlchemyError as e:
            logger.error("Database error creating folder: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the folder.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Folder created: %s", folder.id)
        return serialize_folder(folder)

    async def update_folder(
        self, db: AsyncSession, folder_id: int, payload: Dict[str, Any]
    ) -> None:
        """
        Apply a partial update.

        The existence check runs first, so an unknown id is a 404 even when
        the body is also invalid.
        """
        await self._get_or_404(db, folder_id)
        patch = require_any_field(payload, FOLDER_PATCHABLE_FIELDS, FOLDER_PATCH_MESSAGE)
        values = {"folder_name": sanitize_text(patch["folder_name"])}

        try:
            await folder_repository.update(db, folder_id, values)
        except SQLAlchemyError as e:
            logger.error("Database error updating folder %s: %s", folder_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the folder.",
                context={"folder_id": folder_id},
            )
        logger.info("Folder updated: %s (%s)", folder_id, ", ".join(values))

    async def delete_folder(self, db: AsyncSession, folder_id: int) -> None:
        """Remove a folder; its notes go with it (ON DELETE CASCADE)."""
        try:
            deleted = await folder_repository.delete(db, folder_id)
        except SQLAlchemyError as e:
            logger.error("Database error deleting folder %s: %s", folder_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the folder.",
                context={"folder_id": folder_id},
            )

        if not deleted:
            raise NotFoundError(resource="Folder", resource_id=folder_id)
        logger.info("Folder deleted: %s", folder_id)

    async def _get_or_404(self, db: AsyncSession, folder_id: int) -> Folder:
        try:
            folder = await folder_repository.get(db, folder_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching folder %s: %s", folder_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the folder.",
                context={"folder_id": folder_id},
            )
        if folder is None:
            raise NotFoundError(resource="Folder", resource_id=folder_id)
        return folder


# ── Singleton Instance ────────────────────────────────────────────────────
folder_service = FolderService()

"""
Noteful Backend — Note Service
================================

What:  Business rules for the notes resource.
How:   Validation → sanitization → NoteRepository → sanitized response.
Who:   Called by the /api/notes route handlers.

Create Flow (POST /api/notes):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌──────────┐
    │  Body    │───▶│  Required   │───▶│  Sanitize    │───▶│  INSERT  │
    │  (Route) │    │  fields     │    │  name/content│    │  (repo)  │
    └──────────┘    └─────────────┘    └──────────────┘    └──────────┘

    The folder_id foreign key is enforced by the database; a note pointing
    at a missing folder fails the INSERT and surfaces as DatabaseError.

Update Flow (PATCH /api/notes/{id}):
    1. 404 if the note is missing
    2. 400 unless note_name or note_content is supplied
    3. `modified` defaults to now and is overridden by an explicit value
    4. UPDATE with the supplied fields only
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DatabaseError, NotFoundError
from noteful.models.note import Note, utcnow
from noteful.repositories import note_repository
from noteful.schemas.note import NoteResponse
from noteful.services.sanitizer import sanitize_rich_text, sanitize_text
from noteful.services.validation import (
    merge_patch,
    require_any_field,
    require_fields,
    supplied_fields,
)

logger = logging.getLogger(__name__)

NOTE_REQUIRED_FIELDS = ("note_name", "note_content", "folder_id")
NOTE_CONTENT_FIELDS = ("note_name", "note_content")
NOTE_PATCHABLE_FIELDS = NOTE_CONTENT_FIELDS + ("folder_id", "modified")
NOTE_PATCH_MESSAGE = "Request body must contain either 'note_name' or 'note_content'"


def serialize_note(note: Note) -> NoteResponse:
    """Read path: name and content are sanitized again before they leave the server."""
    return NoteResponse(
        id=note.id,
        note_name=sanitize_text(note.note_name),
        note_content=sanitize_rich_text(note.note_content),
        folder_id=note.folder_id,
        modified=note.modified,
    )


def sanitize_note_values(values: Dict[str, Any]) -> Dict[str, Any]:
    """Write path: sanitize whichever text fields are present."""
    cleaned = dict(values)
    if "note_name" in cleaned:
        cleaned["note_name"] = sanitize_text(cleaned["note_name"])
    if "note_content" in cleaned:
        cleaned["note_content"] = sanitize_rich_text(cleaned["note_content"])
    return cleaned


def as_utc(value: datetime) -> datetime:
    """Client-supplied timestamps without an offset are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class NoteService:
    """
    Stateless; the AsyncSession is passed in on every call.

    Error Handling Strategy:
        NotFoundError and ValidationError propagate as-is. SQLAlchemy errors
        (including foreign key violations) are wrapped in DatabaseError so no
        constraint or table name reaches the client.
    """

    async def list_notes(self, db: AsyncSession) -> List[NoteResponse]:
        try:
            notes = await note_repository.all(db)
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes.",
                context={"error_type": type(e).__name__},
            )
        return [serialize_note(note) for note in notes]

    async def get_note(self, db: AsyncSession, note_id: int) -> NoteResponse:
        note = await self._get_or_404(db, note_id)
        return serialize_note(note)

    async def create_note(self, db: AsyncSession, payload: Dict[str, Any]) -> NoteResponse:
        """
        Validate, sanitize and insert a new note.

        Args:
            db: Async database session
            payload: Request body (note_name, note_content, folder_id)

        Returns:
            NoteResponse with the server-assigned id and modified timestamp

        Raises:
            ValidationError: first missing field in declared order (→ 400)
            DatabaseError: insert failed, e.g. unknown folder_id (→ 500)
        """
        require_fields(payload, NOTE_REQUIRED_FIELDS)
        values = sanitize_note_values({
            "note_name": payload["note_name"],
            "note_content": payload["note_content"],
            "folder_id": payload["folder_id"],
            "modified": utcnow(),
        })

        try:
            note = await note_repository.insert(db, values)
        except SQLAlchemyError as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the note.",
                context={"folder_id": payload["folder_id"], "error_type": type(e).__name__},
            )

        logger.info("Note created: %s (folder %s)", note.id, note.folder_id)
        return serialize_note(note)

    async def update_note(
        self, db: AsyncSession, note_id: int, payload: Dict[str, Any]
    ) -> None:
        """
        Apply a partial update; `modified` is refreshed unless supplied.

        note_name or note_content must be present. folder_id and modified
        are applied alongside them but do not satisfy that rule on their own.

        Raises:
            NotFoundError: note does not exist (→ 404)
            ValidationError: neither note_name nor note_content supplied (→ 400)
            DatabaseError: update failed, e.g. unknown folder_id (→ 500)
        """
        await self._get_or_404(db, note_id)
        require_any_field(payload, NOTE_CONTENT_FIELDS, NOTE_PATCH_MESSAGE)
        patch = supplied_fields(payload, NOTE_PATCHABLE_FIELDS)
        if "modified" in patch:
            patch["modified"] = as_utc(patch["modified"])
        values = sanitize_note_values(merge_patch({"modified": utcnow()}, patch))

        try:
            await note_repository.update(db, note_id, values)
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            )
        logger.info("Note updated: %s (%s)", note_id, ", ".join(sorted(values)))

    async def delete_note(self, db: AsyncSession, note_id: int) -> None:
        try:
            deleted = await note_repository.delete(db, note_id)
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note.",
                context={"note_id": note_id},
            )

        if not deleted:
            raise NotFoundError(resource="Note", resource_id=note_id)
        logger.info("Note deleted: %s", note_id)

    async def _get_or_404(self, db: AsyncSession, note_id: int) -> Note:
        try:
            note = await note_repository.get(db, note_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note.",
                context={"note_id": note_id},
            )
        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()

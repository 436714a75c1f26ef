"""
Noteful Backend — Notes Route Handlers
========================================

What:  HTTP surface of the notes resource.
How:   Extracts path/body, delegates to NoteService, sets status codes
       and the Location header. Errors are formatted by the global handlers.

Endpoints:
    GET    /api/notes            200 [Note]
    POST   /api/notes            201 Note + Location | 400
    GET    /api/notes/{id}       200 Note | 404
    DELETE /api/notes/{id}       204 | 404
    PATCH  /api/notes/{id}       204 | 400 | 404
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from noteful.services.note_service import note_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.list_notes(db)


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        400: {"description": "Missing required field", "model": ErrorResponse},
        500: {"description": "Server error, e.g. unknown folder", "model": ErrorResponse},
    },
    summary="Create a note inside a folder",
)
async def create_note(
    response: Response,
    body: Optional[NoteCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    payload = body.model_dump() if body else {}
    note = await note_service.create_note(db, payload)
    response.headers["Location"] = f"/api/notes/{note.id}"
    return note


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note",
)
async def get_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.get_note(db, note_id)


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note(db, note_id)
    return Response(status_code=204)


@router.patch(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"description": "No updatable field supplied", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update part of a note",
)
async def update_note(
    note_id: int,
    body: Optional[NoteUpdate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    payload = body.model_dump(exclude_unset=True) if body else {}
    await note_service.update_note(db, note_id, payload)
    return Response(status_code=204)

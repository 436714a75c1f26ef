"""
Noteful Backend — Folder Route Handlers
=========================================

What:  HTTP surface of the folders resource.
How:   Extracts path/body, delegates to FolderService, sets status codes
       and the Location header. Errors are formatted by the global handlers.

Endpoints:
    GET    /api/folders          200 [Folder]
    POST   /api/folders          201 Folder + Location
    GET    /api/folders/{id}     200 Folder | 404
    DELETE /api/folders/{id}     204 | 404
    PATCH  /api/folders/{id}     204 | 400 | 404
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from noteful.services.folder_service import folder_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Folders"])


@router.get(
    "/folders",
    response_model=List[FolderResponse],
    summary="List all folders",
)
async def list_folders(
    db: AsyncSession = Depends(get_db_session),
) -> List[FolderResponse]:
    return await folder_service.list_folders(db)


@router.post(
    "/folders",
    status_code=201,
    response_model=FolderResponse,
    responses={
        201: {"description": "Folder created", "model": FolderResponse},
        400: {"description": "Missing folder_name", "model": ErrorResponse},
    },
    summary="Create a folder",
)
async def create_folder(
    response: Response,
    body: Optional[FolderCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    """
    Create a folder and point the client at it.

    Why `body` is optional: an empty request should still get the
    field-specific "Missing 'folder_name'" message, not a schema error.
    """
    payload = body.model_dump() if body else {}
    folder = await folder_service.create_folder(db, payload)
    response.headers["Location"] = f"/api/folders/{folder.id}"
    return folder


@router.get(
    "/folders/{folder_id}",
    response_model=FolderResponse,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Get a single folder",
)
async def get_folder(
    folder_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    return await folder_service.get_folder(db, folder_id)


@router.delete(
    "/folders/{folder_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Delete a folder and its notes",
)
async def delete_folder(
    folder_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await folder_service.delete_folder(db, folder_id)
    return Response(status_code=204)


@router.patch(
    "/folders/{folder_id}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"description": "No updatable field supplied", "model": ErrorResponse},
        404: {"description": "Folder not found", "model": ErrorResponse},
    },
    summary="Rename a folder",
)
async def update_folder(
    folder_id: int,
    body: Optional[FolderUpdate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    # exclude_unset: fields the client did not send stay out of the patch
    payload = body.model_dump(exclude_unset=True) if body else {}
    await folder_service.update_folder(db, folder_id, payload)
    return Response(status_code=204)

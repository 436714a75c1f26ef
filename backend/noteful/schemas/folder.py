"""
Noteful Backend — Folder Request/Response Schemas
===================================================

What:  Pydantic models defining the folder API contract.
How:   Request models declare every field optional so that a missing field
       reaches the validation layer (400 with a field-specific message)
       instead of FastAPI's generic 422. Unknown fields are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FolderCreate(BaseModel):
    """Body of POST /api/folders. `folder_name` is required by FolderService."""
    folder_name: Optional[str] = Field(default=None, description="Folder display name")


class FolderUpdate(BaseModel):
    """Body of PATCH /api/folders/{id}. Only supplied fields are applied."""
    folder_name: Optional[str] = Field(default=None, description="New folder display name")


class FolderResponse(BaseModel):
    """
    What:  Representation of a folder as served to clients.
    Who:   Returned by GET /api/folders, GET /api/folders/{id}, POST /api/folders.

    `folder_name` is always the sanitized value.
    """
    id: int = Field(description="Folder identifier")
    folder_name: str = Field(description="Folder display name (HTML-escaped)")

    model_config = {"from_attributes": True}

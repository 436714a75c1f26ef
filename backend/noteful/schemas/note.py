"""
Noteful Backend — Note Request/Response Schemas
=================================================

What:  Pydantic models defining the note API contract.
How:   Request models declare every field optional; required-field rules live
       in the validation layer so the error message names the missing field.
       Unknown fields (e.g. "fieldToIgnore") are dropped by pydantic.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser
from pydantic import BaseModel, Field, field_serializer, field_validator


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    Required by NoteService, in this order: note_name, note_content, folder_id.
    """
    note_name: Optional[str] = Field(default=None, description="Note title")
    note_content: Optional[str] = Field(default=None, description="Note body")
    folder_id: Optional[int] = Field(default=None, description="Owning folder id")


class NoteUpdate(BaseModel):
    """
    Body of PATCH /api/notes/{id}.

    `modified` may be supplied explicitly, either as ISO 8601 or as a
    client-formatted date such as "10/19/2026" (month first); otherwise the
    server refreshes it to the time of the update.
    """
    note_name: Optional[str] = Field(default=None, description="New note title")
    note_content: Optional[str] = Field(default=None, description="New note body")
    folder_id: Optional[int] = Field(default=None, description="Move note to this folder")
    modified: Optional[datetime] = Field(default=None, description="Explicit modification time")

    @field_validator("modified", mode="before")
    @classmethod
    def parse_modified(cls, value: Any) -> Any:
        """Blank strings count as absent; other strings go through dateutil."""
        if not isinstance(value, str):
            return value
        if not value.strip():
            return None
        try:
            return date_parser.parse(value, dayfirst=False)
        except OverflowError as e:
            raise ValueError(f"Date out of range: {value!r}") from e


class NoteResponse(BaseModel):
    """
    What:  Representation of a note as served to clients.
    Who:   Returned by GET /api/notes, GET /api/notes/{id}, POST /api/notes.

    Why the serializer on `modified`:
        SQLite hands back naive datetimes even for TIMESTAMP WITH TIME ZONE
        columns. Every stored value is UTC, so a naive value is labelled UTC
        before serialization and the same note serializes identically after
        create and after a later GET.
    """
    id: int = Field(description="Note identifier")
    note_name: str = Field(description="Note title (HTML-escaped)")
    note_content: str = Field(description="Note body (sanitized markup)")
    folder_id: Optional[int] = Field(default=None, description="Owning folder id")
    modified: datetime = Field(description="Last modification time (UTC ISO 8601)")

    model_config = {"from_attributes": True}

    @field_serializer("modified")
    def serialize_modified(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()

"""Response models for the transcription gateway API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TranscriptRecord(BaseModel):
    """A persisted transcript as returned to clients."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    filename: str
    transcript: str
    created_at: datetime = Field(serialization_alias="createdAt")


class TranscribeResponse(BaseModel):
    """Response returned after a successful transcription."""

    success: bool = True
    transcript: str


class DeleteResponse(BaseModel):
    """Response returned after deleting a single transcript."""

    success: bool = True
    message: str


class BulkDeleteResponse(BaseModel):
    """Response returned after clearing all transcripts."""

    success: bool = True
    message: str
    deleted_count: int = Field(serialization_alias="deletedCount")

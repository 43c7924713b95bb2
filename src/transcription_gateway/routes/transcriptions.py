"""Transcription endpoints."""

import logging
from typing import Annotated, List, Optional, Union

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from transcription_gateway.dependencies import get_repository, get_transcription_handler
from transcription_gateway.domain import AudioUpload
from transcription_gateway.exceptions import (
    EmptyTranscriptError,
    InvalidAudioTypeError,
    MissingAudioFileError,
    TranscriptionError,
    TranscriptNotFoundError,
    TranscriptPersistenceError,
)
from transcription_gateway.handlers import TranscriptionHandler
from transcription_gateway.repositories import TranscriptRepository
from transcription_gateway.response_models import (
    BulkDeleteResponse,
    DeleteResponse,
    TranscribeResponse,
    TranscriptRecord,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["transcriptions"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_transcription_handler)]
RepositoryDep = Annotated[TranscriptRepository, Depends(get_repository)]


def _read_upload(audio: Union[UploadFile, str, None]) -> Optional[AudioUpload]:
    # Plain form values and file inputs submitted without a file count as no upload.
    if not isinstance(audio, StarletteUploadFile) or not audio.filename:
        return None
    return AudioUpload(
        filename=audio.filename,
        content_type=audio.content_type,
        data=audio.file.read(),
    )


@router.post("/transcribe", response_model=TranscribeResponse)
def transcribe(
    handler: HandlerDep,
    audio: Union[UploadFile, str, None] = File(None),
) -> TranscribeResponse:
    """
    Transcribes an uploaded audio file.

    Validates the file type, forwards the audio to the speech-to-text
    provider and stores the recognized text.
    """
    try:
        record = handler.process(_read_upload(audio))
    except MissingAudioFileError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InvalidAudioTypeError as e:
        logger.info(
            "Rejected upload with disallowed type",
            extra={"content_type": e.content_type},
        )
        raise HTTPException(
            status_code=400,
            detail={
                "error": str(e),
                "receivedType": e.content_type,
                "allowedTypes": list(e.allowed_types),
            },
        )
    except EmptyTranscriptError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TranscriptionError:
        raise HTTPException(status_code=500, detail="Server error during transcription")
    except TranscriptPersistenceError:
        raise HTTPException(status_code=500, detail="Failed to save transcript")
    except Exception:
        logger.exception("Unexpected error during transcription")
        raise HTTPException(status_code=500, detail="Server error")

    return TranscribeResponse(transcript=record.transcript)


@router.get("/transcriptions", response_model=List[TranscriptRecord])
def list_transcriptions(repo: RepositoryDep):
    """Returns all transcripts, newest first."""
    try:
        return repo.list_all()
    except TranscriptPersistenceError:
        raise HTTPException(status_code=500, detail="Failed to fetch transcripts")


@router.delete("/transcriptions/{transcript_id}", response_model=DeleteResponse)
def delete_transcription(transcript_id: str, repo: RepositoryDep):
    """Deletes a single transcript."""
    try:
        repo.delete(transcript_id)
    except TranscriptNotFoundError:
        raise HTTPException(status_code=404, detail="Transcript not found")
    except TranscriptPersistenceError:
        raise HTTPException(status_code=500, detail="Failed to delete transcript")
    return DeleteResponse(message="Transcript deleted")


@router.delete("/transcriptions", response_model=BulkDeleteResponse)
def delete_all_transcriptions(repo: RepositoryDep):
    """Deletes every stored transcript."""
    try:
        deleted = repo.delete_all()
    except TranscriptPersistenceError:
        raise HTTPException(status_code=500, detail="Failed to delete transcripts")
    return BulkDeleteResponse(message="All transcripts deleted", deleted_count=deleted)

"""Handler for the upload, transcribe and persist pipeline."""

import logging
from typing import Optional

from transcription_gateway.domain import AudioUpload, UploadValidator
from transcription_gateway.exceptions import EmptyTranscriptError
from transcription_gateway.infrastructure.interfaces import TranscriptionService
from transcription_gateway.repositories import TranscriptRepository
from transcription_gateway.response_models import TranscriptRecord


class TranscriptionHandler:
    """Orchestrates upload validation, transcription and persistence."""

    def __init__(
        self,
        validator: UploadValidator,
        transcription_service: TranscriptionService,
        repository: TranscriptRepository,
        logger: logging.Logger | None = None,
    ):
        self._validator = validator
        self._transcription_service = transcription_service
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def process(self, upload: Optional[AudioUpload]) -> TranscriptRecord:
        """
        Transcribes an uploaded audio file and stores the result.

        Args:
            upload: The uploaded audio, or None when the request carried no file.

        Returns:
            The persisted transcript record.

        Raises:
            MissingAudioFileError: If no file was uploaded.
            InvalidAudioTypeError: If the file type is not allowed.
            TranscriptionError: If the provider call fails.
            EmptyTranscriptError: If no speech was recognized.
            TranscriptPersistenceError: If saving the transcript fails.
        """
        upload = self._validator.validate(upload)

        self._logger.info(
            "Processing audio",
            extra={
                "file_name": upload.filename,
                "content_type": upload.content_type,
                "size": len(upload.data),
            },
        )

        raw_transcript = self._transcription_service.transcribe(
            upload.data, upload.content_type, upload.filename
        )
        transcript = raw_transcript.strip()

        if not transcript:
            self._logger.warning(
                "Empty transcription result", extra={"file_name": upload.filename}
            )
            raise EmptyTranscriptError(upload.filename)

        record = self._repository.create(upload.filename, transcript)

        self._logger.info(
            "Audio processed",
            extra={"file_name": upload.filename, "transcript_id": str(record.id)},
        )
        return record

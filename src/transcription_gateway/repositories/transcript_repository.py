"""Repository for transcript data access."""

import logging
from datetime import datetime
from typing import Callable, List
from uuid import UUID

from sqlmodel import col, select

from transcription_gateway.db_models import Transcript, utcnow
from transcription_gateway.exceptions import (
    TranscriptNotFoundError,
    TranscriptPersistenceError,
)
from transcription_gateway.response_models import TranscriptRecord


class TranscriptRepository:
    """
    Handles all database operations for transcripts.

    Encapsulates SQL queries and transaction management and returns
    detached response models, keeping the HTTP layer free of database
    concerns. Records are never updated after insertion.
    """

    def __init__(
        self,
        session_factory,
        clock: Callable[[], datetime] = utcnow,
        logger: logging.Logger | None = None,
    ):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
            clock: Source of creation timestamps.
            logger: Logger for persistence events.
        """
        self._session_factory = session_factory
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)

    def create(self, filename: str, transcript: str) -> TranscriptRecord:
        """
        Inserts a new transcript record.

        Raises:
            TranscriptPersistenceError: If the insert fails.
        """
        try:
            with self._session_factory() as db_session:
                entity = Transcript(
                    filename=filename,
                    transcript=transcript,
                    created_at=self._clock(),
                )
                db_session.add(entity)
                db_session.commit()
                db_session.refresh(entity)
                record = TranscriptRecord.model_validate(entity)
        except Exception as e:
            self._logger.exception(
                "Failed to persist transcript", extra={"file_name": filename}
            )
            raise TranscriptPersistenceError("create", cause=e) from e

        self._logger.info(
            "Transcript persisted",
            extra={"transcript_id": str(record.id), "file_name": filename},
        )
        return record

    def list_all(self) -> List[TranscriptRecord]:
        """
        Retrieves all transcripts, newest first.

        Raises:
            TranscriptPersistenceError: If the query fails.
        """
        statement = select(Transcript).order_by(col(Transcript.created_at).desc())
        try:
            with self._session_factory() as db_session:
                results = db_session.exec(statement).all()
                return [TranscriptRecord.model_validate(t) for t in results]
        except Exception as e:
            self._logger.exception("Failed to list transcripts")
            raise TranscriptPersistenceError("list", cause=e) from e

    def delete(self, transcript_id: str) -> None:
        """
        Deletes a single transcript.

        Args:
            transcript_id: Identifier of the transcript. Values that are not
                valid identifiers are treated as unknown.

        Raises:
            TranscriptNotFoundError: If no transcript has this identifier.
            TranscriptPersistenceError: If the delete fails.
        """
        try:
            key = UUID(str(transcript_id))
        except ValueError:
            raise TranscriptNotFoundError(transcript_id) from None

        try:
            with self._session_factory() as db_session:
                entity = db_session.get(Transcript, key)
                if entity is None:
                    raise TranscriptNotFoundError(transcript_id)
                db_session.delete(entity)
                db_session.commit()
        except TranscriptNotFoundError:
            raise
        except Exception as e:
            self._logger.exception(
                "Failed to delete transcript", extra={"transcript_id": transcript_id}
            )
            raise TranscriptPersistenceError("delete", cause=e) from e

        self._logger.info("Transcript deleted", extra={"transcript_id": transcript_id})

    def delete_all(self) -> int:
        """
        Deletes every transcript.

        Returns:
            Number of transcripts removed.

        Raises:
            TranscriptPersistenceError: If the delete fails.
        """
        try:
            with self._session_factory() as db_session:
                entities = db_session.exec(select(Transcript)).all()
                for entity in entities:
                    db_session.delete(entity)
                db_session.commit()
                deleted = len(entities)
        except Exception as e:
            self._logger.exception("Failed to delete all transcripts")
            raise TranscriptPersistenceError("delete_all", cause=e) from e

        self._logger.info("All transcripts deleted", extra={"deleted_count": deleted})
        return deleted

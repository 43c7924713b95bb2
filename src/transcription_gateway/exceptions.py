"""Custom exceptions for the transcription gateway."""

from typing import Sequence


class MissingAudioFileError(Exception):
    """Raised when a transcription request carries no audio file."""

    def __init__(self):
        super().__init__("No audio file uploaded")


class InvalidAudioTypeError(Exception):
    """Raised when an uploaded file's MIME type is not on the allow-list."""

    def __init__(self, content_type: str | None, allowed_types: Sequence[str]):
        self.content_type = content_type
        self.allowed_types = tuple(allowed_types)
        super().__init__(
            f"Invalid file type '{content_type}'. "
            f"Allowed: {', '.join(self.allowed_types)}"
        )


class EmptyTranscriptError(Exception):
    """Raised when the provider recognized no speech in the audio."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__("No speech detected or transcription empty.")


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")


class TranscriptPersistenceError(Exception):
    """Raised when a transcript store operation fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Transcript store operation '{operation}' failed")


class TranscriptNotFoundError(Exception):
    """Raised when a requested transcript does not exist."""

    def __init__(self, transcript_id: str):
        self.transcript_id = transcript_id
        super().__init__(f"Transcript {transcript_id} not found")

"""Infrastructure interface exports."""

from .transcription_service import TranscriptionService

__all__ = ["TranscriptionService"]

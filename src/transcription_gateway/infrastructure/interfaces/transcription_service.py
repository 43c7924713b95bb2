"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, audio_data: bytes, content_type: str, file_name: str) -> str:
        """
        Transcribes audio data and returns the primary transcript.

        Args:
            audio_data: Raw audio file bytes.
            content_type: MIME type of the audio.
            file_name: Original name of the uploaded file, used for logging.

        Returns:
            The recognized text, untrimmed. Empty when nothing was recognized.

        Raises:
            TranscriptionError: If the provider call fails.
        """
        pass

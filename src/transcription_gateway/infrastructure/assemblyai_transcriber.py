"""AssemblyAI implementation of the TranscriptionService interface."""

import logging
import mimetypes
import tempfile

import assemblyai as aai

from transcription_gateway.exceptions import TranscriptionError

from .interfaces import TranscriptionService


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber, logger: logging.Logger | None = None):
        self._transcriber = transcriber
        self._logger = logger or logging.getLogger(__name__)

    def transcribe(self, audio_data: bytes, content_type: str, file_name: str) -> str:
        """
        Transcribes audio data using AssemblyAI.

        Writes audio to a temp file (required by AssemblyAI SDK),
        performs transcription, and returns the recognized text.
        """
        suffix = mimetypes.guess_extension(content_type.split(";")[0].strip()) or ""
        try:
            with tempfile.NamedTemporaryFile(suffix=suffix, delete=True) as temp_file:
                temp_file.write(audio_data)
                temp_file.flush()

                transcription = self._transcriber.transcribe(temp_file.name)

            if transcription.status == aai.TranscriptStatus.error:
                raise TranscriptionError(file_name, Exception(transcription.error))

            transcript = transcription.text or ""
            self._logger.info(
                "AssemblyAI transcription completed",
                extra={"file_name": file_name, "transcript_length": len(transcript)},
            )
            return transcript

        except TranscriptionError:
            self._logger.error(
                "AssemblyAI returned an error status", extra={"file_name": file_name}
            )
            raise
        except Exception as e:
            self._logger.exception(
                "AssemblyAI transcription failed", extra={"file_name": file_name}
            )
            raise TranscriptionError(file_name, e) from e

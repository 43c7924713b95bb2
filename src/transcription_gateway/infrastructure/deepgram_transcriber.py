"""Deepgram implementation of the TranscriptionService interface."""

import logging

import httpx

from transcription_gateway.domain import RecognitionOptions, extract_transcript
from transcription_gateway.exceptions import TranscriptionError

from .interfaces import TranscriptionService

LISTEN_PATH = "/v1/listen"


class DeepgramTranscriber(TranscriptionService):
    """Handles prerecorded audio transcription through the Deepgram REST API."""

    def __init__(
        self,
        client: httpx.Client,
        api_key: str,
        options: RecognitionOptions,
        logger: logging.Logger | None = None,
    ):
        self._client = client
        self._api_key = api_key
        self._options = options
        self._logger = logger or logging.getLogger(__name__)

    def transcribe(self, audio_data: bytes, content_type: str, file_name: str) -> str:
        try:
            response = self._client.post(
                LISTEN_PATH,
                params=self._options.to_query_params(),
                headers={
                    "Authorization": f"Token {self._api_key}",
                    "Content-Type": content_type,
                },
                content=audio_data,
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._logger.exception(
                "Deepgram transcription failed",
                extra={"file_name": file_name, "model": self._options.model},
            )
            raise TranscriptionError(file_name, e) from e

        transcript = extract_transcript(payload)
        self._logger.info(
            "Deepgram transcription completed",
            extra={"file_name": file_name, "transcript_length": len(transcript)},
        )
        return transcript

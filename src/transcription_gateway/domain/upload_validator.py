"""Upload validation against the configured MIME allow-list."""

from typing import Iterable, Optional

from transcription_gateway.exceptions import InvalidAudioTypeError, MissingAudioFileError

from .models import AudioUpload


def normalize_mime_type(content_type: str) -> str:
    """Lowercases a MIME type and drops whitespace around parameter separators."""
    parts = [part.strip() for part in content_type.split(";")]
    return ";".join(part for part in parts if part).lower()


class UploadValidator:
    """Accepts uploads whose declared MIME type is on the allow-list."""

    def __init__(self, allowed_types: Iterable[str]):
        self._allowed_types = tuple(allowed_types)
        self._normalized = {normalize_mime_type(t) for t in self._allowed_types}

    @property
    def allowed_types(self) -> tuple[str, ...]:
        return self._allowed_types

    def is_allowed(self, content_type: Optional[str]) -> bool:
        if not content_type:
            return False
        return normalize_mime_type(content_type) in self._normalized

    def validate(self, upload: Optional[AudioUpload]) -> AudioUpload:
        """
        Checks that a file was attached and that its type is allowed.

        Raises:
            MissingAudioFileError: If no file was uploaded.
            InvalidAudioTypeError: If the MIME type is not on the allow-list.
        """
        if upload is None:
            raise MissingAudioFileError()
        if not self.is_allowed(upload.content_type):
            raise InvalidAudioTypeError(upload.content_type, self._allowed_types)
        return upload

"""Domain models for the transcription gateway."""

from typing import Optional

from pydantic import BaseModel


class AudioUpload(BaseModel, frozen=True):
    """An uploaded audio file held in memory."""

    filename: str
    content_type: Optional[str] = None
    data: bytes


class RecognitionOptions(BaseModel, frozen=True):
    """Fixed recognition settings sent with every transcription request."""

    model: str = "nova-3"
    smart_format: bool = True
    punctuate: bool = True
    language: Optional[str] = None

    def to_query_params(self) -> dict[str, str]:
        """Renders the options as provider query parameters."""
        params = {
            "model": self.model,
            "smart_format": str(self.smart_format).lower(),
            "punctuate": str(self.punctuate).lower(),
        }
        if self.language:
            params["language"] = self.language
        return params

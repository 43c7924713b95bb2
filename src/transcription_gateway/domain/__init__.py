"""Domain layer exports."""

from .models import AudioUpload, RecognitionOptions
from .transcript_parser import extract_transcript
from .upload_validator import UploadValidator

__all__ = ["AudioUpload", "RecognitionOptions", "UploadValidator", "extract_transcript"]

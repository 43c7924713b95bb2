from .transcript_repository import TranscriptRepository

__all__ = ["TranscriptRepository"]

"""Application configuration loaded from environment variables."""

import os
from typing import List, Optional

from pydantic import BaseModel, computed_field

DEFAULT_ALLOWED_AUDIO_TYPES = (
    "audio/webm",
    "audio/webm;codecs=opus",
    "audio/wav",
    "audio/mp3",
    "audio/mpeg",
    "audio/m4a",
    "audio/x-m4a",
    "audio/ogg",
    "audio/3gpp",
    "audio/mp4",
)


def _split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    raw_url: str = "sqlite:///./transcripts.db"

    @computed_field
    @property
    def url(self) -> str:
        """Returns the SQLAlchemy URL with the psycopg driver for PostgreSQL."""
        url = self.raw_url
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+psycopg://", 1)
        return url


class DeepgramConfig(BaseModel, frozen=True):
    """Deepgram API configuration."""

    api_key: str
    base_url: str = "https://api.deepgram.com"
    model: str = "nova-3"
    smart_format: bool = True
    punctuate: bool = True
    language: Optional[str] = None
    timeout_seconds: float = 60.0


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    format_text: bool = True
    punctuate: bool = True
    language: Optional[str] = None


class UploadConfig(BaseModel, frozen=True):
    """Constraints applied to uploaded audio files."""

    allowed_mime_types: tuple[str, ...] = DEFAULT_ALLOWED_AUDIO_TYPES


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    port: int = 4000
    cors_allowed_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    database: DatabaseConfig
    transcription_provider: str = "deepgram"
    deepgram: DeepgramConfig
    assemblyai: AssemblyAIConfig
    upload: UploadConfig = UploadConfig()
    server: ServerConfig = ServerConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    language = os.getenv("TRANSCRIPTION_LANGUAGE") or None
    allowed_types = _split_csv(os.getenv("ALLOWED_AUDIO_TYPES"))
    origins = _split_csv(os.getenv("CORS_ALLOWED_ORIGINS"))

    return AppConfig(
        database=DatabaseConfig(
            raw_url=os.getenv("DATABASE_URL", "sqlite:///./transcripts.db"),
        ),
        transcription_provider=os.getenv("TRANSCRIPTION_PROVIDER", "deepgram")
        .strip()
        .lower(),
        deepgram=DeepgramConfig(
            api_key=os.getenv("DEEPGRAM_API_KEY", ""),
            base_url=os.getenv("DEEPGRAM_BASE_URL", "https://api.deepgram.com"),
            model=os.getenv("DEEPGRAM_MODEL", "nova-3"),
            smart_format=_env_flag("DEEPGRAM_SMART_FORMAT", True),
            punctuate=_env_flag("DEEPGRAM_PUNCTUATE", True),
            language=language,
            timeout_seconds=float(os.getenv("DEEPGRAM_TIMEOUT_SECONDS", "60")),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            language=language,
        ),
        upload=UploadConfig(
            allowed_mime_types=tuple(allowed_types) or DEFAULT_ALLOWED_AUDIO_TYPES,
        ),
        server=ServerConfig(
            port=int(os.getenv("PORT", "4000")),
            cors_allowed_origins=tuple(origins) or ("*",),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        ),
    )

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from transcription_gateway.app import create_app
from transcription_gateway.config import (
    DEFAULT_ALLOWED_AUDIO_TYPES,
    AppConfig,
    AssemblyAIConfig,
    DatabaseConfig,
    DeepgramConfig,
)
from transcription_gateway.database import get_engine, init_db, make_session_factory
from transcription_gateway.dependencies import ServiceContainer
from transcription_gateway.domain import UploadValidator
from transcription_gateway.infrastructure.interfaces import TranscriptionService
from transcription_gateway.repositories import TranscriptRepository


class StubTranscriptionService(TranscriptionService):
    def __init__(self, text: str = "hello world", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[dict] = []

    def transcribe(self, audio_data: bytes, content_type: str, file_name: str) -> str:
        self.calls.append(
            {"audio": audio_data, "content_type": content_type, "file_name": file_name}
        )
        if self.error is not None:
            raise self.error
        return self.text


class FakeClock:
    """Returns strictly increasing timestamps, one second apart."""

    def __init__(self) -> None:
        self._now = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


@pytest.fixture
def engine():
    engine = get_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine) -> TranscriptRepository:
    return TranscriptRepository(make_session_factory(engine), clock=FakeClock())


@pytest.fixture
def stub_service() -> StubTranscriptionService:
    return StubTranscriptionService()


@pytest.fixture
def validator() -> UploadValidator:
    return UploadValidator(DEFAULT_ALLOWED_AUDIO_TYPES)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        database=DatabaseConfig(raw_url="sqlite://"),
        deepgram=DeepgramConfig(api_key="test-key"),
        assemblyai=AssemblyAIConfig(api_key="test-key"),
    )


@pytest.fixture
def container(repository, stub_service, validator) -> ServiceContainer:
    return ServiceContainer(
        repository=repository,
        transcription_service=stub_service,
        validator=validator,
    )


@pytest.fixture
def client(config, container) -> TestClient:
    app = create_app(config, container)
    with TestClient(app) as client:
        yield client

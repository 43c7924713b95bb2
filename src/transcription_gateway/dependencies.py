"""Dependency injection configuration for the transcription gateway."""

import logging
from typing import Annotated, Callable, Iterable

import assemblyai as aai
import httpx
from fastapi import Depends, Request

from transcription_gateway.config import AppConfig
from transcription_gateway.database import get_engine, init_db, make_session_factory
from transcription_gateway.domain import RecognitionOptions, UploadValidator
from transcription_gateway.handlers import TranscriptionHandler
from transcription_gateway.infrastructure import AssemblyAITranscriber, DeepgramTranscriber
from transcription_gateway.infrastructure.interfaces import TranscriptionService
from transcription_gateway.repositories import TranscriptRepository

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Holds the explicitly constructed collaborators shared by all requests."""

    def __init__(
        self,
        repository: TranscriptRepository,
        transcription_service: TranscriptionService,
        validator: UploadValidator,
        closers: Iterable[Callable[[], None]] = (),
        logger: logging.Logger | None = None,
    ):
        self.repository = repository
        self.transcription_service = transcription_service
        self.validator = validator
        self.handler = TranscriptionHandler(
            validator, transcription_service, repository, logger=logger
        )
        self._closers = list(closers)

    def close(self) -> None:
        """Releases network clients and database connections."""
        for close in self._closers:
            close()
        self._closers.clear()


def build_transcription_service(
    config: AppConfig, logger: logging.Logger | None = None
) -> tuple[TranscriptionService, list]:
    """Creates the configured provider and the callables that release it."""
    provider = config.transcription_provider

    if provider == "deepgram":
        http_client = httpx.Client(
            base_url=config.deepgram.base_url,
            timeout=config.deepgram.timeout_seconds,
        )
        options = RecognitionOptions(
            model=config.deepgram.model,
            smart_format=config.deepgram.smart_format,
            punctuate=config.deepgram.punctuate,
            language=config.deepgram.language,
        )
        service = DeepgramTranscriber(
            http_client, config.deepgram.api_key, options, logger=logger
        )
        return service, [http_client.close]

    if provider == "assemblyai":
        aai.settings.api_key = config.assemblyai.api_key
        aai_config = aai.TranscriptionConfig(
            punctuate=config.assemblyai.punctuate,
            format_text=config.assemblyai.format_text,
            language_code=config.assemblyai.language,
        )
        service = AssemblyAITranscriber(aai.Transcriber(config=aai_config), logger=logger)
        return service, []

    raise ValueError(f"Unknown transcription provider '{provider}'")


def build_container(
    config: AppConfig, app_logger: logging.Logger | None = None
) -> ServiceContainer:
    """
    Creates the database engine, repository and provider from configuration.

    Components log through children of ``app_logger`` when one is given.
    """

    def child(name: str) -> logging.Logger | None:
        return app_logger.getChild(name) if app_logger else None

    engine = get_engine(config.database.url)
    init_db(engine)
    logger.info("Database initialized", extra={"dialect": engine.dialect.name})

    repository = TranscriptRepository(
        make_session_factory(engine), logger=child("repository")
    )
    transcription_service, closers = build_transcription_service(
        config, child("provider")
    )
    logger.info(
        "Transcription provider configured",
        extra={"provider": config.transcription_provider},
    )

    return ServiceContainer(
        repository=repository,
        transcription_service=transcription_service,
        validator=UploadValidator(config.upload.allowed_mime_types),
        closers=[*closers, engine.dispose],
        logger=child("handler"),
    )


def get_container(request: Request) -> ServiceContainer:
    """Returns the container attached to the running application."""
    return request.app.state.container


ContainerDep = Annotated[ServiceContainer, Depends(get_container)]


def get_transcription_handler(container: ContainerDep) -> TranscriptionHandler:
    """Returns the configured transcription handler."""
    return container.handler


def get_repository(container: ContainerDep) -> TranscriptRepository:
    """Returns the configured transcript repository."""
    return container.repository

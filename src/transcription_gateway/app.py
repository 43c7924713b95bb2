"""Application factory."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from transcription_gateway.config import AppConfig, load_config
from transcription_gateway.dependencies import ServiceContainer, build_container
from transcription_gateway.logging import setup_logging
from transcription_gateway.routes import health_router, transcriptions_router


async def http_error_handler(_, exc: StarletteHTTPException) -> JSONResponse:
    """Renders HTTP errors as a JSON object carrying an ``error`` message."""
    if isinstance(exc.detail, dict):
        content = dict(exc.detail)
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def validation_error_handler(_, exc: RequestValidationError) -> JSONResponse:
    """Renders request validation failures in the same ``error`` shape."""
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


def create_app(
    config: Optional[AppConfig] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Builds the FastAPI application.

    Args:
        config: Application configuration; loaded from the environment if omitted.
        container: Prebuilt collaborators; built from ``config`` if omitted.
    """
    config = config or load_config()
    logger = setup_logging(config.server.log_level)
    container = container or build_container(config, logger)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Transcription gateway started")
        yield
        app.state.container.close()
        logger.info("Transcription gateway stopped")

    app = FastAPI(title="Transcription Gateway", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health_router)
    app.include_router(transcriptions_router)
    return app

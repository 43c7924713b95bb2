"""Liveness endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

LIVENESS_MESSAGE = "Transcription gateway is running"


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return LIVENESS_MESSAGE

"""Extraction of the primary transcript from a recognition response."""

from collections.abc import Mapping, Sequence
from typing import Any


def _first(items: Any) -> Any:
    if isinstance(items, Sequence) and not isinstance(items, (str, bytes)) and items:
        return items[0]
    return None


def extract_transcript(payload: Any) -> str:
    """
    Reads ``results.channels[0].alternatives[0].transcript`` from a response.

    Returns an empty string when any step of that path is missing or does not
    have the expected shape. The text is returned untrimmed.
    """
    if not isinstance(payload, Mapping):
        return ""
    results = payload.get("results")
    if not isinstance(results, Mapping):
        return ""
    channel = _first(results.get("channels"))
    if not isinstance(channel, Mapping):
        return ""
    alternative = _first(channel.get("alternatives"))
    if not isinstance(alternative, Mapping):
        return ""
    transcript = alternative.get("transcript")
    return transcript if isinstance(transcript, str) else ""

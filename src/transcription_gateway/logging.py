"""Structured JSON logging for the gateway and the uvicorn server."""

import logging
import sys

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")
APP_LOGGER_NAME = "transcription_gateway"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Routes all application and server logs through one JSON stdout handler.

    Records carry timestamp, level, logger name and message, plus the
    trace_id and span_id that ddtrace injects while a request is traced.
    Structured fields passed through ``extra`` are emitted as JSON keys.
    Calling this again replaces the previous handler instead of stacking.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG". Unknown names fall
            back to INFO.

    Returns:
        logging.Logger: The gateway's package logger.
    """
    log_level = logging.getLevelName(level.strip().upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    # uvicorn installs its own handlers; keep its records out of the root
    # logger so they are written once.
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = [handler]
        server_logger.setLevel(log_level)
        server_logger.propagate = False

    return logging.getLogger(APP_LOGGER_NAME)

import logging

import pytest
from pythonjsonlogger import jsonlogger

from transcription_gateway.logging import APP_LOGGER_NAME, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_installs_single_json_handler() -> None:
    logger = setup_logging("debug")
    setup_logging("debug")

    root = logging.getLogger()
    assert logger.name == APP_LOGGER_NAME
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert root.level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").propagate is False


@pytest.mark.usefixtures("restore_root_logger")
def test_unknown_level_falls_back_to_info() -> None:
    setup_logging("chatty")

    assert logging.getLogger().level == logging.INFO

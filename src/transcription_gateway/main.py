"""ASGI entry point for the transcription gateway."""

import uvicorn
from ddtrace import patch_all

from transcription_gateway.app import create_app
from transcription_gateway.config import load_config

patch_all()

_config = load_config()

app = create_app(_config)


def run():
    """Serves the application with uvicorn."""
    uvicorn.run(app, host="0.0.0.0", port=_config.server.port, log_config=None)


if __name__ == "__main__":
    run()

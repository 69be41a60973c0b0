#!/usr/bin/env python3
"""Serve the gallery API under uvicorn.

Settings are validated before the server starts, so a bad environment
fails the process instead of the first request.
"""

import sys

import logfire
import uvicorn

from gallery.config import Settings
from gallery.util.logging import setup_logging
from gallery.util.observability import configure_logfire

APP_FACTORY = "gallery.interface.api.app:create_app"


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting gallery API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )

    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            reload=settings.environment == "development",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Gallery API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())

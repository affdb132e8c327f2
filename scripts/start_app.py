#!/usr/bin/env python3
"""Container entrypoint: configure observability, then serve the API."""

import sys

import logfire
import uvicorn

from authn.config import Settings
from authn.util.logging import setup_logging
from authn.util.observability import configure_logfire

APP_FACTORY = "authn.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Starting authn API", port=settings.port, git_sha=settings.git_sha)
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_config=None,  # handlers come from setup_logging
        )
    except Exception:
        # Reported before the container exits, so crash loops show up in Logfire
        logfire.exception("authn API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())

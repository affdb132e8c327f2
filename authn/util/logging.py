"""Standard library logging setup.

Route modules and uvicorn log through ``logging``; records are forwarded to
Logfire so they land next to the service spans.
"""

import logging
import sys

import logfire

from authn.config import Settings


def log_level_for(settings: Settings) -> int:
    """Pick the log level for an environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Call after ``configure_logfire`` so the forwarding handler has
    somewhere to send records.

    Args:
        settings: Application settings
    """
    level = log_level_for(settings)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logging.basicConfig(
        level=level,
        handlers=[console, logfire.LogfireLoggingHandler()],
        force=True,  # Override uvicorn's default configuration
    )

    # httpx logs every request line at INFO; spans already cover it
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("authn").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )

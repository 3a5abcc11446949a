"""Logging configuration for the application."""

import logging
import sys

from conduit.config import Settings

# Libraries whose INFO output drowns out our own
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "httpx", "httpcore")


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the process.

    Structured events go through logfire; this covers library and uvicorn
    output that uses the standard ``logging`` module.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("conduit").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )

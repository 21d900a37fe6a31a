"""Logging configuration for the application."""

import logging
import sys

from social.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure standard library logging.

    Logfire handles structured telemetry; this keeps uvicorn and
    third-party loggers at sensible levels on stdout.

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

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger("social").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )

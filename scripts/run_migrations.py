#!/usr/bin/env python3
"""Apply database migrations with Logfire error tracking."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from social.config import Settings
from social.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", environment=settings.environment)

        command.upgrade(Config("alembic.ini"), "head")

        logfire.info("Database migrations completed")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so a deploy does not start against a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())

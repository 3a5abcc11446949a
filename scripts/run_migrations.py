#!/usr/bin/env python3
"""Upgrade the database schema to the latest revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from conduit.config import Settings
from conduit.util.logging import setup_logging
from conduit.util.observability import configure_logfire


def main() -> int:
    """Run ``alembic upgrade head``, reporting failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve a stale schema
            raise

    logfire.info("Database migrations completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())

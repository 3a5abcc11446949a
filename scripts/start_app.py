#!/usr/bin/env python3
"""Start the API server."""

import sys

import logfire
import uvicorn

from conduit.config import Settings
from conduit.util.logging import setup_logging
from conduit.util.observability import configure_logfire


def main() -> int:
    """Configure logging and telemetry, then serve the app with uvicorn."""
    settings = Settings()
    setup_logging(settings)
    # Logfire must be configured before the app is created and instrumented
    configure_logfire(settings)

    try:
        logfire.info("Starting Conduit API", port=settings.api.port)
        uvicorn.run(
            "conduit.interface.api.app:create_app",
            factory=True,
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())

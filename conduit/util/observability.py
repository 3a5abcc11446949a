"""Observability configuration using Logfire.

Services, repositories and queries open spans directly:

    import logfire

    with logfire.span("article_service.create_article", user_id=str(user_id)):
        logfire.info("Article created", slug=slug.root)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from conduit.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure the process-wide Logfire SDK.

    Telemetry leaves the process only when ``OBSERVABILITY__SEND_TO_LOGFIRE``
    is true, or when it is unset and a token is configured. Console output
    is always on.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = observability.logfire_token is not None

    logfire.configure(
        service_name="conduit-api",
        service_version=settings.release,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``.

    Headers are not captured: ``Authorization`` carries the bearer token.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, capture_headers=False)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement executed on ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")

"""Logfire setup and instrumentation.

Services and repositories open spans named ``<component>.<operation>`` and
attach ids as attributes::

    with logfire.span("post_service.like", post_id=post_id, user_id=str(user_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from devconnect.config import ObservabilitySettings, Settings

SERVICE_NAME = "devconnect-api"


def _sends_to_logfire(observability: ObservabilitySettings) -> bool:
    # An explicit flag wins; otherwise send only when a token is configured
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at startup.

    OBSERVABILITY__LOGFIRE_TOKEN enables export, OBSERVABILITY__SEND_TO_LOGFIRE
    overrides it either way. Without export, spans are printed to the console.
    """
    send = _sends_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            span_style="indented",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured", environment=settings.environment, send_to_logfire=send
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request; headers are left out so tokens never leave."""
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outgoing GitHub calls."""
    logfire.instrument_httpx()

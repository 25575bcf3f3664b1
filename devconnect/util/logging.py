"""Standard library logging, forwarded to Logfire.

Modules that don't open spans themselves (the GitHub adapter, third-party
libraries) log through ``logging``; the handler installed here sends those
records to Logfire next to the spans.
"""

import logging

import logfire

from devconnect.config import Settings

# Chatty below WARNING
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging to Logfire at DEBUG (debug mode) or INFO."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level, handlers=[logfire.LogfireLoggingHandler()], force=True
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    get_logger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Module logger under the ``devconnect`` hierarchy."""
    return logging.getLogger(name)

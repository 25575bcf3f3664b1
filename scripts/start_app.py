#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logfire and logging are configured before the app module is imported, so
startup failures are reported too.
"""

import argparse
import sys

import logfire
import uvicorn

from devconnect.config import Settings
from devconnect.util.logging import setup_logging
from devconnect.util.observability import configure_logfire

APP = "devconnect.interface.api.app:app"


def main() -> int:
    parser = argparse.ArgumentParser(description="Serve the devconnect API")
    parser.add_argument("--reload", action="store_true", help="reload on changes")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Serving API", port=settings.port, environment=settings.environment)
    try:
        uvicorn.run(
            APP,
            host="0.0.0.0",
            port=settings.port,
            reload=args.reload,
            log_config=None,  # keep the handlers installed by setup_logging
        )
    except Exception as e:
        logfire.exception("API failed to start", error=str(e))
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())

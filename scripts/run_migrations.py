#!/usr/bin/env python3
"""Upgrade the database schema.

Usage:
    python scripts/run_migrations.py            # to head
    python scripts/run_migrations.py 3c1f0a7d52e4
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from devconnect.config import Settings
from devconnect.util.observability import configure_logfire


def upgrade(settings: Settings, revision: str) -> None:
    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("migrations.upgrade", revision=revision):
        command.upgrade(config, revision)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    try:
        upgrade(settings, args.revision)
    except Exception as e:
        # Fail the deploy rather than serve on a half-migrated schema
        logfire.exception("Migration failed", revision=args.revision, error=str(e))
        raise

    logfire.info("Schema is at revision", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())

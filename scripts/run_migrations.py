#!/usr/bin/env python3
"""Upgrade the database to the latest Alembic revision.

Runs before the API starts; a failure stops the deploy.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from authn.config import Settings
from authn.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", settings.database.url)

    with logfire.span("migrations.upgrade", target="head"):
        try:
            command.upgrade(config, "head")
        except Exception:
            logfire.exception("Database migration failed")
            raise
    logfire.info("Database migrations completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())

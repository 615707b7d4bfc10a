#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from hunt.config import Settings
from hunt.util.logging import setup_logging
from hunt.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema and log any errors to Logfire.

    Args:
        revision: Target revision
    """
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting database migrations", revision=revision)
        alembic_cfg = Config("alembic.ini")
        alembic_cfg.attributes["configure_logger"] = False
        command.upgrade(alembic_cfg, revision)
        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail loudly so the deployment does not start on a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))

"""Logging configuration for the application.

Application code logs through logfire. Third-party libraries (uvicorn,
alembic, asyncpg) log through stdlib ``logging``; those records are
forwarded to logfire so everything ends up in one place.
"""

import logging

import logfire

from hunt.config import Settings

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncio", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into logfire.

    Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Override any existing configuration
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )

"""Standard library logging for uvicorn and third-party packages.

Application code logs through logfire; this only tunes the loggers of the
libraries underneath it.
"""

import logging
import sys

from blog.config import Settings

_LEVEL_BY_ENVIRONMENT = {
    "test": logging.WARNING,
    "development": logging.INFO,
    "staging": logging.INFO,
    "production": logging.INFO,
}

# Chatty at INFO; only their warnings are useful
_QUIET_LOGGERS = ("httpx", "httpcore", "passlib", "asyncpg", "sqlalchemy.pool")


def setup_logging(settings: Settings) -> None:
    """Configure root logging once at process start.

    Args:
        settings: Application settings; ``debug`` forces DEBUG everywhere
    """
    level = (
        logging.DEBUG if settings.debug else _LEVEL_BY_ENVIRONMENT[settings.environment]
    )

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )

#!/usr/bin/env python3
"""Serve the blog API with uvicorn.

Host and port come from HOST / PORT (default 0.0.0.0:5000).
"""

import sys

import logfire
import uvicorn

from blog.config import Settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting blog API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "blog.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=settings.environment == "development" and settings.debug,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Blog API failed to start")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())

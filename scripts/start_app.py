#!/usr/bin/env python3
"""Start the CivicSync API with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from civicsync.config import Settings
from civicsync.util.logging import setup_logging
from civicsync.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure logging early to catch startup errors
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting CivicSync API",
            host=settings.host,
            port=settings.port,
            seed_sample_data=settings.seed_sample_data,
        )

        # The app module builds its DI container and routes on import
        uvicorn.run(
            "civicsync.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())

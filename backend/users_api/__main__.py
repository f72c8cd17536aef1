"""
Run the Users API under uvicorn::

    python -m users_api

uvicorn traps SIGINT/SIGTERM, stops accepting connections and gives
in-flight requests ``SHUTDOWN_GRACE_SECONDS`` to finish before exiting.
"""

import logging

import uvicorn

from users_api.config import get_settings
from users_api.logging_config import setup_logging

logger = logging.getLogger("users_api")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info("Server (%s) running on http://%s:%s", settings.app_env, settings.host, settings.port)
    uvicorn.run(
        "users_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        reload=False,
    )
    logger.info("Server closed")


if __name__ == "__main__":
    main()

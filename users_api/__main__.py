"""Run the users API with uvicorn: ``python -m users_api``."""
from __future__ import annotations

import logging

import uvicorn

from users_api.core.config import get_settings
from users_api.core.logging import configure_logging

logger = logging.getLogger("users_api")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server running on http://localhost:%s", settings.port)
    uvicorn.run(
        "users_api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Run the HTTP service: ``python -m apod_colors``."""

from __future__ import annotations

import logging

import uvicorn

from apod_colors.api.main import create_app
from apod_colors.config.settings import get_settings
from apod_colors.monitoring.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting server on %s:%d (%s)", settings.host, settings.port, settings.environment)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

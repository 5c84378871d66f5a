"""GO Trip API entry point."""

import logging

import uvicorn

from gotrip.api.app import create_app
from gotrip.app_logging import setup_logging
from gotrip.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.logging)

    if not settings.api.key:
        logger.warning("API_KEY is not set; every request will be rejected")

    app = create_app(settings)

    logger.info(f"Starting GO Trip API on {settings.api.host}:{settings.api.port}")
    uvicorn.run(
        app,
        host=settings.api.host,
        port=settings.api.port,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()

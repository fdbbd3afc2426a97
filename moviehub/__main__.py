# moviehub/__main__.py
"""
Run the API with uvicorn on the configured host and port:

    python -m moviehub
"""

import logging

import uvicorn

from moviehub.logging_setup import setup_logging
from moviehub.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting server on %s:%s", settings.host, settings.port)

    uvicorn.run(
        "moviehub.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

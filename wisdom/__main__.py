"""Process entry — `python -m wisdom` / `wisdom` console script.

Invariants:
    - Settings read once here; invalid or missing configuration exits with status 1
    - uvicorn's own Server header disabled so only settings.server_name is sent
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from wisdom.config import Settings
from wisdom.infrastructure.observability import setup_logging
from wisdom.main import create_app

logger = logging.getLogger("wisdom")


def main() -> None:
    try:
        settings = Settings()
    except ValidationError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    app = create_app(settings)
    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        server_header=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""
Entry point for the user CRUD service.

Usage:
  python main.py
"""

import logging

from dotenv import load_dotenv

# Load environment variables from .env file before settings are read
load_dotenv()

from crud_api.core.config import get_settings  # noqa: E402
from crud_api.core.logging import configure_logging  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting user CRUD API on port %s", settings.port)
    uvicorn.run("crud_api.app:create_app", factory=True, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()

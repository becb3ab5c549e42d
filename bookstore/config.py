"""
Configuration read from the environment.
"""

import logging
import os
from pathlib import Path

DB_PATH = Path(os.getenv("BOOKSTORE_DB_PATH", "data/catalog.db"))
DEFAULT_PAGE_SIZE = int(os.getenv("BOOKSTORE_DEFAULT_PAGE_SIZE", "10"))
LOG_LEVEL = os.getenv("BOOKSTORE_LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up root logging for scripts; the library itself never calls this."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

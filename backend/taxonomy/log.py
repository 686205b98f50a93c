"""
Logging configuration.
"""

import logging

from taxonomy.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging() -> None:
    """Configure the root logger from settings. Safe to call more than once."""
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level.upper())

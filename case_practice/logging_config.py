"""
Logging setup for the practice client.

Modules log through ``logging.getLogger(__name__)``; this only wires the
root handler once at process start.
"""

import logging

from .config import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )

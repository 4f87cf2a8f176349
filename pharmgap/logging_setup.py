"""
loguru sink configuration
"""

import sys
from typing import Optional

from loguru import logger

from pharmgap.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Replace the default sink with one at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.LOG_LEVEL).upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {extra} | {message}",
    )

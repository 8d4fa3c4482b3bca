"""
Logging setup for processes embedding the catalog.
"""

from __future__ import annotations

import logging
from typing import Optional

from shop.config import Settings, get_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(settings: Optional[Settings] = None) -> int:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to read the level from (global settings if None)

    Returns:
        The numeric level applied
    """
    settings = settings or get_settings()
    level = settings.effective_log_level

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("shop").setLevel(level)

    return level

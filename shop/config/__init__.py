"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from shop.config import get_settings

    settings = get_settings()
    print(settings.result_limit)

==============================================================================
"""

from .settings import SELECTION_ORDERS, Settings, get_settings

__all__ = [
    "SELECTION_ORDERS",
    "Settings",
    "get_settings",
]

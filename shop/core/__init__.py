"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the catalog.

Modules:
--------
- exceptions: ShopException class and error factory functions
- log_setup: Root logging configuration

Usage:
------
    from shop.core import ShopException, setup_logging

    # Or use exception factory functions via module
    from shop.core import exceptions
    raise exceptions.catalog_not_loaded()

==============================================================================
"""

from .exceptions import ShopException
from .log_setup import LOG_FORMAT, setup_logging

__all__ = [
    "ShopException",
    "LOG_FORMAT",
    "setup_logging",
]

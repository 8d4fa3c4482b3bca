"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog with bounded name and producer search.

Classes:
--------
- Product: Immutable product model, equal by id
- Shop: Protocol naming the catalog capability set
- ProductCatalog: The catalog store

==============================================================================
"""

from .models import CatalogStats, Product, ProductResponse
from .catalog import ProductCatalog, Shop, get_catalog, init_catalog, require_catalog

__all__ = [
    "CatalogStats",
    "Product",
    "ProductResponse",
    "ProductCatalog",
    "Shop",
    "get_catalog",
    "init_catalog",
    "require_catalog",
]

"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog with bounded substring search.

Features:
---------
- Products keyed by unique id, duplicates refused rather than overwritten
- Case-sensitive substring search on name or producer
- Result sets capped by a truncation window (default 10)
- Producer prefixing for names that collide inside the window

Search Pipeline:
---------------
    matches -> selection order -> truncate to window -> format / sort

Disambiguation only looks at the window. A name that is unique among the
candidates that survived truncation is returned bare, even if other
products with the same name were cut off.

==============================================================================
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Dict, Iterable, List, Optional, Protocol, Set

from shop.config import SELECTION_ORDERS, get_settings
from shop.core import exceptions
from shop.utils.validators import ProductIdValidator

from .models import CatalogStats, Product


# Module logger
logger = logging.getLogger(__name__)


class Shop(Protocol):
    """Capability set offered by a product store."""

    def add_new_product(self, product: Product) -> bool:
        """Add a product; False if its id is already present."""
        ...

    def delete_product(self, product_id: str) -> bool:
        """Delete a product by id; False if it was not present."""
        ...

    def list_products_by_name(self, search_string: str) -> Set[str]:
        """Display strings of products whose name contains the string."""
        ...

    def list_products_by_producer(self, search_string: str) -> List[str]:
        """Names of products whose producer contains the string, by producer."""
        ...


class ProductCatalog:
    """
    Product store implementing the Shop capability set.

    The id mapping is the only state; every search scans it afresh.
    All access goes through a single re-entrant lock.

    Attributes:
        result_limit: Size of the truncation window
        selection_order: "insertion" or "id", applied before truncation

    Example:
        >>> catalog = ProductCatalog()
        >>> catalog.add_new_product(Product(id="1", name="Milk", producer="A"))
        True
        >>> catalog.add_new_product(Product(id="2", name="Milk", producer="B"))
        True
        >>> sorted(catalog.list_products_by_name("Milk"))
        ['A - Milk', 'B - Milk']
    """

    def __init__(
        self,
        result_limit: Optional[int] = None,
        selection_order: Optional[str] = None,
        reject_empty_ids: Optional[bool] = None
    ) -> None:
        """
        Initialize an empty catalog.

        Arguments left as None are taken from settings.

        Raises:
            ShopException: If result_limit or selection_order is invalid
        """
        settings = get_settings()

        if result_limit is None:
            result_limit = settings.result_limit
        if selection_order is None:
            selection_order = settings.selection_order
        if reject_empty_ids is None:
            reject_empty_ids = settings.reject_empty_ids

        if isinstance(result_limit, bool) or not isinstance(result_limit, int) or result_limit < 1:
            raise exceptions.invalid_result_limit(result_limit)
        if selection_order not in SELECTION_ORDERS:
            raise exceptions.invalid_selection_order(selection_order, SELECTION_ORDERS)

        self._result_limit = result_limit
        self._selection_order = selection_order
        self._reject_empty_ids = reject_empty_ids
        self._id_validator = ProductIdValidator()
        self._products: Dict[str, Product] = {}
        self._lock = threading.RLock()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def result_limit(self) -> int:
        return self._result_limit

    @property
    def selection_order(self) -> str:
        return self._selection_order

    @property
    def products(self) -> List[Product]:
        """Snapshot of all products in selection order."""
        with self._lock:
            return self._ordered(self._products.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return product_id in self._products

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def add_new_product(self, product: Product) -> bool:
        """
        Store a product under its id.

        Args:
            product: Product to add

        Returns:
            True if stored, False if the id already exists (the existing
            entry is kept) or the id was refused by validation
        """
        if self._reject_empty_ids:
            is_valid, error = self._id_validator.validate(product.id)
            if not is_valid:
                logger.warning(f"Refused product {product.id!r}: {error}")
                return False

        with self._lock:
            if product.id in self._products:
                logger.debug(f"Product {product.id!r} already exists, not overwritten")
                return False
            self._products[product.id] = product

        logger.debug(f"Added product {product.id!r} ({product.producer} - {product.name})")
        return True

    def delete_product(self, product_id: str) -> bool:
        """
        Remove the product with the given id.

        Returns:
            True if a product was removed, False if none had that id
        """
        with self._lock:
            removed = self._products.pop(product_id, None)

        if removed is None:
            logger.debug(f"Product {product_id!r} not found, nothing deleted")
            return False

        logger.debug(f"Deleted product {product_id!r}")
        return True

    def clear(self) -> int:
        """Remove every product and return how many were dropped."""
        with self._lock:
            count = len(self._products)
            self._products.clear()

        logger.info(f"Cleared {count} products from catalog")
        return count

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def list_products_by_name(self, search_string: str) -> Set[str]:
        """
        Search product names by substring.

        Names shared by more than one product inside the truncation window
        are returned as "<producer> - <name>"; all others as "<name>".

        Args:
            search_string: Case-sensitive substring ("" matches everything)

        Returns:
            Set of at most result_limit display strings
        """
        with self._lock:
            window = self._window(
                p for p in self._products.values() if search_string in p.name
            )

        name_counts = Counter(p.name for p in window)

        return {p.display_name(with_producer=name_counts[p.name] > 1) for p in window}

    def list_products_by_producer(self, search_string: str) -> List[str]:
        """
        Search producers by substring.

        Args:
            search_string: Case-sensitive substring ("" matches everything)

        Returns:
            Names of at most result_limit products, ordered by producer.
            Equal producers keep their selection order.
        """
        with self._lock:
            window = self._window(
                p for p in self._products.values() if search_string in p.producer
            )

        return [p.name for p in sorted(window, key=lambda p: p.producer)]

    def _ordered(self, products: Iterable[Product]) -> List[Product]:
        """Apply the selection order. Insertion order is the dict order."""
        if self._selection_order == "id":
            return sorted(products, key=lambda p: p.id)
        return list(products)

    def _window(self, matches: Iterable[Product]) -> List[Product]:
        """Order matches and keep the first result_limit of them."""
        return self._ordered(matches)[: self._result_limit]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get product by id."""
        with self._lock:
            return self._products.get(product_id)

    def get_stats(self) -> CatalogStats:
        """Get catalog statistics."""
        with self._lock:
            producers = {p.producer for p in self._products.values()}
            total = len(self._products)

        return CatalogStats(
            total_products=total,
            total_producers=len(producers),
            result_limit=self._result_limit
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_catalog_instance: Optional[ProductCatalog] = None


def get_catalog() -> Optional[ProductCatalog]:
    """Get the global catalog instance."""
    return _catalog_instance


def require_catalog() -> ProductCatalog:
    """
    Get the global catalog instance or fail.

    Raises:
        ShopException: CATALOG_NOT_LOADED if init_catalog was never called
    """
    if _catalog_instance is None:
        raise exceptions.catalog_not_loaded()
    return _catalog_instance


def init_catalog(
    result_limit: Optional[int] = None,
    selection_order: Optional[str] = None,
    reject_empty_ids: Optional[bool] = None
) -> ProductCatalog:
    """
    Initialize the global catalog instance, replacing any previous one.

    Returns:
        ProductCatalog instance
    """
    global _catalog_instance
    _catalog_instance = ProductCatalog(
        result_limit=result_limit,
        selection_order=selection_order,
        reject_empty_ids=reject_empty_ids
    )
    logger.info(
        f"✅ Catalog initialized (limit={_catalog_instance.result_limit}, "
        f"order={_catalog_instance.selection_order})"
    )
    return _catalog_instance

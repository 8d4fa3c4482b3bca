"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides a clean settings cache, fresh catalogs and sample products.

==============================================================================
"""

import os
from typing import Generator, List

import pytest

from shop.catalog import catalog as catalog_module
from shop.catalog import Product, ProductCatalog
from shop.config import get_settings


# ============================================================================
# ENVIRONMENT FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop SHOP_* variables and reset cached singletons around each test."""
    for key in list(os.environ):
        if key.upper().startswith("SHOP_"):
            monkeypatch.delenv(key, raising=False)

    get_settings.cache_clear()
    monkeypatch.setattr(catalog_module, "_catalog_instance", None)

    yield

    get_settings.cache_clear()


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> ProductCatalog:
    """Empty catalog with default settings."""
    return ProductCatalog()


@pytest.fixture
def milk_a() -> Product:
    return Product(id="1", name="Milk", producer="A")


@pytest.fixture
def milk_b() -> Product:
    return Product(id="2", name="Milk", producer="B")


@pytest.fixture
def grocery_products() -> List[Product]:
    """A small mixed assortment."""
    return [
        Product(id="p-1", name="Milk", producer="Zeta Dairy"),
        Product(id="p-2", name="Butter", producer="Alpha Foods"),
        Product(id="p-3", name="Milk", producer="Alpha Foods"),
        Product(id="p-4", name="Oat Milk", producer="Greenfield"),
        Product(id="p-5", name="Bread", producer="Zeta Bakery"),
    ]


@pytest.fixture
def filled_catalog(catalog: ProductCatalog, grocery_products: List[Product]) -> ProductCatalog:
    """Default catalog loaded with grocery_products."""
    for product in grocery_products:
        assert catalog.add_new_product(product)
    return catalog

"""
Shop Catalog - in-process product catalog with bounded search.

Usage:
------
    from shop import Product, ProductCatalog

    catalog = ProductCatalog()
    catalog.add_new_product(Product(id="1", name="Milk", producer="Farm"))
    catalog.list_products_by_name("Mil")
"""

from shop.catalog import Product, ProductCatalog, Shop

__version__ = "1.0.0"

__all__ = [
    "Product",
    "ProductCatalog",
    "Shop",
]

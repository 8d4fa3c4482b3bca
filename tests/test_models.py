"""
==============================================================================
Product Model Tests
==============================================================================
"""

import pytest
from pydantic import ValidationError

from shop.catalog import CatalogStats, Product, ProductResponse


class TestProductIdentity:
    """Tests for id-only equality and hashing."""

    def test_equal_by_id(self):
        """Test products with the same id are equal despite other fields."""
        first = Product(id="1", name="Milk", producer="A")
        second = Product(id="1", name="Cheese", producer="B")

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_different_ids_not_equal(self):
        """Test products with different ids differ even if otherwise identical."""
        first = Product(id="1", name="Milk", producer="A")
        second = Product(id="2", name="Milk", producer="A")

        assert first != second

    def test_not_equal_to_other_types(self):
        """Test comparison with a bare id string is False."""
        assert Product(id="1", name="Milk", producer="A") != "1"


class TestProductValidation:
    """Tests for construction and immutability."""

    def test_product_is_frozen(self):
        """Test fields cannot be reassigned."""
        product = Product(id="1", name="Milk", producer="A")

        with pytest.raises(ValidationError):
            product.name = "Cream"

    def test_non_string_id_rejected(self):
        """Test strict string fields."""
        with pytest.raises(ValidationError):
            Product(id=1, name="Milk", producer="A")

    def test_missing_field_rejected(self):
        """Test every field is required."""
        with pytest.raises(ValidationError):
            Product(id="1", name="Milk")

    def test_empty_strings_allowed(self):
        """Test empty strings are valid field values."""
        product = Product(id="", name="", producer="")
        assert product.id == ""


class TestProductDisplay:
    """Tests for display strings and response schemas."""

    def test_display_name(self):
        """Test bare and producer-prefixed display strings."""
        product = Product(id="1", name="Milk", producer="A")

        assert product.display_name() == "Milk"
        assert product.display_name(with_producer=True) == "A - Milk"

    def test_product_response(self):
        """Test response snapshot carries every field."""
        response = ProductResponse.from_product(Product(id="1", name="Milk", producer="A"))

        assert response.model_dump() == {"id": "1", "name": "Milk", "producer": "A"}

    def test_stats_reject_negative(self):
        """Test stats counters are non-negative."""
        with pytest.raises(ValidationError):
            CatalogStats(total_products=-1, total_producers=0, result_limit=10)

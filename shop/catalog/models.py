"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog products.

==============================================================================
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Immutable product record.

    Identity is the ``id`` field alone: two products with the same id are
    equal and hash alike even if their name or producer differ.

    Attributes:
        id: Unique identifier within the catalog
        name: Product display name
        producer: Producer (manufacturer) name
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: str = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Product name")
    producer: str = Field(..., description="Producer name")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def display_name(self, with_producer: bool = False) -> str:
        """Return ``"<producer> - <name>"`` or just ``"<name>"``."""
        if with_producer:
            return f"{self.producer} - {self.name}"
        return self.name


class ProductResponse(BaseModel):
    """Serialisable snapshot of a product."""

    id: str
    name: str
    producer: str

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Create response from Product model."""
        return cls(id=product.id, name=product.name, producer=product.producer)


class CatalogStats(BaseModel):
    """Catalog statistics."""

    total_products: int = Field(ge=0)
    total_producers: int = Field(ge=0)
    result_limit: int = Field(ge=1)

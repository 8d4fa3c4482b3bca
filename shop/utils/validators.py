"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for catalog input data.

This module implements:
- ProductIdValidator: Validates product identifiers

Validation Rules for Product IDs:
--------------------------------
- Must be a string
- Must not be empty or whitespace only
- At most 128 characters

==============================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Tuple


class ProductIdValidator:
    """
    Validator for product identifiers.

    Only consulted when the catalog is configured to reject empty ids;
    by default any string is an acceptable id.

    Example:
        >>> validator = ProductIdValidator()
        >>> validator.validate("   ")
        (False, 'Product id cannot be blank')
    """

    MAX_LENGTH = 128

    def validate(self, product_id: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate a product id.

        Args:
            product_id: Identifier to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not isinstance(product_id, str):
            return False, "Product id must be a string"

        if not product_id:
            return False, "Product id is required"

        if not product_id.strip():
            return False, "Product id cannot be blank"

        if len(product_id) > self.MAX_LENGTH:
            return False, f"Product id must be at most {self.MAX_LENGTH} characters"

        return True, None

    def is_valid(self, product_id: Any) -> bool:
        """Quick validation check."""
        is_valid, _ = self.validate(product_id)
        return is_valid

"""
==============================================================================
Utilities Package
==============================================================================

Modules:
--------
- validators: Product id validation

==============================================================================
"""

from .validators import ProductIdValidator

__all__ = [
    "ProductIdValidator",
]

"""
Catalog Exception Handling

Single ShopException class for configuration and lifecycle errors.
Nominal catalog operations report failure through return values instead.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class ShopException(Exception):
    """
    Unified exception for all catalog error scenarios.

    Usage:
        raise ShopException("Catalog not loaded", "CATALOG_NOT_LOADED")
        raise ShopException("Bad limit", "INVALID_RESULT_LIMIT", {"value": 0})

    Error Codes:
        Configuration:
            - INVALID_RESULT_LIMIT
            - INVALID_SELECTION_ORDER

        Lifecycle:
            - CATALOG_NOT_LOADED
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize catalog exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "CATALOG_NOT_LOADED")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_result_limit(value: Any) -> ShopException:
    """Create invalid result limit exception."""
    return ShopException(
        f"Result limit must be a positive integer, got {value!r}",
        "INVALID_RESULT_LIMIT",
        {"result_limit": value}
    )


def invalid_selection_order(value: Any, supported: tuple) -> ShopException:
    """Create invalid selection order exception."""
    return ShopException(
        f"Unsupported selection order: {value!r}",
        "INVALID_SELECTION_ORDER",
        {"selection_order": value, "supported": list(supported)}
    )


def catalog_not_loaded() -> ShopException:
    """Create catalog not loaded exception."""
    return ShopException("Product catalog not loaded", "CATALOG_NOT_LOADED")

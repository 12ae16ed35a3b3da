"""
Application Exception Handling

Single AppException class for all catalog errors with factory functions
for each error scenario.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides a consistent error format across the catalog core and the
    console layer.

    Usage:
        raise AppException("Price must be a number", "VALIDATION_ERROR")
        raise AppException("Disk full", "IO_FAILURE", {"path": "products.json"})

    Error Codes:
        Input:
            - VALIDATION_ERROR

        Catalog:
            - DUPLICATE_PRODUCT

        Persistence:
            - IO_FAILURE
            - PARSE_FAILURE
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "DUPLICATE_PRODUCT")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a structured dictionary."""
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

def validation_error(field: str, reason: str) -> AppException:
    """Create input validation exception."""
    return AppException(
        f"Invalid {field}: {reason}",
        "VALIDATION_ERROR",
        {"field": field, "reason": reason}
    )


def duplicate_product(name: str, category: str) -> AppException:
    """Create duplicate product exception."""
    return AppException(
        f"A product with the name '{name}' and category '{category}' already exists",
        "DUPLICATE_PRODUCT",
        {"name": name, "category": category}
    )


def io_failure(path: str, reason: str) -> AppException:
    """Create file read/write failure exception."""
    return AppException(
        f"Could not access '{path}': {reason}",
        "IO_FAILURE",
        {"path": path, "reason": reason}
    )


def parse_failure(path: str, reason: str) -> AppException:
    """Create malformed catalog file exception."""
    return AppException(
        f"Could not parse '{path}': {reason}",
        "PARSE_FAILURE",
        {"path": path, "reason": reason}
    )

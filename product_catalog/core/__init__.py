"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException class and error factory functions

Usage:
------
    from product_catalog.core import AppException

    # Or use exception factory functions via module
    from product_catalog.core import exceptions
    raise exceptions.validation_error("price", "must be a number")

==============================================================================
"""

from .exceptions import AppException

__all__ = [
    "AppException",
]

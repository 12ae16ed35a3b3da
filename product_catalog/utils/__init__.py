"""
==============================================================================
Utilities Package
==============================================================================

Utility classes for the application.

Modules:
--------
- validators: Console input validation

==============================================================================
"""

from .validators import ProductInputValidator

__all__ = [
    "ProductInputValidator",
]

"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog with duplicate detection, search, price listing
and JSON persistence.

Classes:
--------
- Product: Pydantic model for products
- ProductCatalog: Catalog manager with search and persistence
- AddResult, PriceListing, PersistResult: Operation results

==============================================================================
"""

from .models import (
    AddResult,
    AddStatus,
    ListingEntry,
    PersistResult,
    PersistStatus,
    PriceListing,
    Product,
)
from .catalog import ProductCatalog

__all__ = [
    "Product",
    "ProductCatalog",
    "AddResult",
    "AddStatus",
    "ListingEntry",
    "PriceListing",
    "PersistResult",
    "PersistStatus",
]

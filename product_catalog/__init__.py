"""
==============================================================================
Product Catalog Console
==============================================================================

In-memory product catalog with duplicate detection, price listing,
search and JSON persistence, driven from an interactive console.

Packages:
---------
- catalog: Product model and ProductCatalog
- config: Pydantic settings
- console: Formatter and interactive session
- core: Exceptions
- utils: Input validators

==============================================================================
"""

__version__ = "1.0.0"

"""
==============================================================================
Product Catalog Console - Application Entry Point
==============================================================================

Interactive console for maintaining a product catalog stored as JSON.

Usage:
------
    product-catalog
    product-catalog --file data/products.json --no-color
    python -m product_catalog --debug

==============================================================================
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from product_catalog.catalog import ProductCatalog
from product_catalog.config import Settings, get_settings
from product_catalog.console import ConsoleSession


logger = logging.getLogger(__name__)


# ============================================================================
# ARGUMENTS
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product-catalog",
        description="Add, list, search and save products in a JSON catalog."
    )
    parser.add_argument(
        "--file",
        dest="products_file",
        help="Catalog JSON file (default: PRODUCTS_FILE or products.json)"
    )
    parser.add_argument(
        "--no-color",
        dest="use_color",
        action="store_false",
        default=None,
        help="Disable ANSI colors"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug logging"
    )
    return parser


def resolve_settings(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Apply command line overrides on top of the environment settings."""
    base = base or get_settings()
    overrides = {
        key: value
        for key, value in vars(args).items()
        if value is not None
    }
    if not overrides:
        return base
    return base.model_copy(update=overrides)


# ============================================================================
# LOGGING SETUP
# ============================================================================

def configure_logging(settings: Settings) -> None:
    # Warnings only by default so log lines stay out of the prompts
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


# ============================================================================
# MAIN
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    configure_logging(settings)

    logger.info(f"Starting {settings.app_name} with {settings.products_path}")

    catalog = ProductCatalog(settings.products_path)
    session = ConsoleSession(catalog, settings=settings)
    return session.run()


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()

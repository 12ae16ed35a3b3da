"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog with JSON file persistence.

Features:
---------
- Duplicate detection on case-insensitive (name, category)
- Case-insensitive substring search over name and category
- Price-sorted listing with totals and highlight flags
- Atomic save and all-or-nothing load

JSON Structure:
--------------
[
  {"name": "Running Shoe", "category": "Shoes", "price": 59.9},
  {"name": "Oxford Shirt", "category": "Shirts", "price": 24.5}
]

Load Policy:
-----------
The file is parsed into a temporary list first. The live list is replaced
only when every entry parsed, so a corrupted file leaves the previous
in-memory catalog untouched. A missing file is not an error and leaves the
catalog as it was (empty at start-up).

==============================================================================
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from product_catalog.config import get_settings
from product_catalog.core import exceptions
from product_catalog.core.exceptions import AppException

from .models import (
    AddResult,
    AddStatus,
    ListingEntry,
    PersistResult,
    PersistStatus,
    PriceListing,
    Product,
)


# Module logger
logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ProductCatalog:
    """
    Product catalog manager with search, listing and persistence.

    Keeps products in insertion order. No two entries share the same
    case-insensitive (name, category) pair.

    Attributes:
        products_file: Default path for save() and load()

    Example:
        >>> catalog = ProductCatalog(Path("products.json"))
        >>> catalog.load()
        >>> catalog.add(Product(name="Mug", category="Kitchen", price="4.50"))
        >>> listing = catalog.list_sorted_by_price(highlight="mug")
    """

    def __init__(self, products_file: Optional[PathLike] = None) -> None:
        """
        Initialize an empty catalog.

        Args:
            products_file: Default catalog file (uses settings if None)
        """
        if products_file is None:
            products_file = get_settings().products_path
        self._products_file = Path(products_file)
        self._products: List[Product] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products_file(self) -> Path:
        return self._products_file

    @property
    def products(self) -> List[Product]:
        """Get all products in insertion order."""
        return self._products.copy()

    @property
    def is_empty(self) -> bool:
        return not self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.copy())

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add(self, product: Product) -> AddResult:
        """
        Append a product unless its (name, category) is already present.

        Args:
            product: Product to add

        Returns:
            AddResult with status ADDED, or REJECTED plus the existing entry
        """
        existing = self._find_by_key(product.key)
        if existing is not None:
            error = exceptions.duplicate_product(existing.name, existing.category)
            logger.warning(f"Rejected duplicate product: {product.name!r} / {product.category!r}")
            return AddResult(
                status=AddStatus.REJECTED,
                product=product,
                conflict=existing,
                error=error
            )

        self._products.append(product)
        logger.debug(f"Added product: {product.name!r} / {product.category!r}")
        return AddResult(status=AddStatus.ADDED, product=product)

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def _find_by_key(self, key: Tuple[str, str]) -> Optional[Product]:
        for product in self._products:
            if product.key == key:
                return product
        return None

    def find(self, name: str, category: str) -> Optional[Product]:
        """Find product by exact name and category (case-insensitive)."""
        return self._find_by_key((name.strip().casefold(), category.strip().casefold()))

    def search(self, term: str) -> List[Product]:
        """
        Search products by name or category substring.

        Args:
            term: Search term, matched case-insensitively

        Returns:
            Matching products in insertion order; empty for a blank term
        """
        if not term.strip():
            return []

        return [product for product in self._products if product.matches(term)]

    # =========================================================================
    # LISTING
    # =========================================================================

    def total_price(self) -> Decimal:
        """Sum of all product prices."""
        return sum((product.price for product in self._products), Decimal("0"))

    def list_sorted_by_price(
        self,
        highlight: Optional[str] = None,
        matches_only: bool = False
    ) -> PriceListing:
        """
        Build a price-ascending listing of the products.

        sorted() is stable, so products with equal prices keep their
        insertion order.

        Args:
            highlight: Optional term; entries whose name or category
                contain it are flagged as highlighted
            matches_only: List only the products matching highlight

        Returns:
            PriceListing with entries and the total of the listed prices
        """
        term = highlight if highlight and highlight.strip() else ""
        products = self.search(term) if matches_only else self._products
        ordered = sorted(products, key=lambda product: product.price)

        entries = [
            ListingEntry(product=product, highlighted=bool(term) and product.matches(term))
            for product in ordered
        ]

        return PriceListing(
            entries=entries,
            total=sum((product.price for product in ordered), Decimal("0")),
            highlight=term or None,
            matches_only=matches_only
        )

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def save(self, path: Optional[PathLike] = None) -> PersistResult:
        """
        Write all products to a JSON file.

        The file is written to a temporary sibling first and moved into
        place, so an interrupted save never leaves a truncated catalog.

        Args:
            path: Target file (defaults to products_file)

        Returns:
            PersistResult with status SAVED, or FAILED with an IO_FAILURE
        """
        target = Path(path) if path is not None else self._products_file
        records = [product.to_record() for product in self._products]

        try:
            self._write_atomic(target, self._encode(records))
        except OSError as e:
            error = exceptions.io_failure(str(target), e.strerror or str(e))
            logger.error(f"Error saving products: {error.message}")
            return PersistResult(status=PersistStatus.FAILED, path=str(target), error=error)

        logger.info(f"✅ Saved {len(records)} products to {target}")
        return PersistResult(status=PersistStatus.SAVED, path=str(target), count=len(records))

    @staticmethod
    def _encode(records: List[dict]) -> str:
        """
        Serialize records as a JSON array.

        Decimal values are written digit for digit as JSON number literals.
        """
        if not records:
            return "[]\n"

        rows = []
        for record in records:
            fields = ", ".join(
                f"{json.dumps(key)}: "
                + (format(value, "f") if isinstance(value, Decimal) else json.dumps(value, ensure_ascii=False))
                for key, value in record.items()
            )
            rows.append(f"  {{{fields}}}")

        return "[\n" + ",\n".join(rows) + "\n]\n"

    @staticmethod
    def _file_mode(target: Path) -> int:
        """Mode of the existing file, or the umask default for a new one."""
        try:
            return stat.S_IMODE(target.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    @classmethod
    def _write_atomic(cls, target: Path, content: str) -> None:
        directory = target.parent
        fd, tmp_name = tempfile.mkstemp(
            dir=directory,
            prefix=f".{target.name}.",
            suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp creates the file 0600
            os.chmod(tmp_name, cls._file_mode(target))
            os.replace(tmp_name, target)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

    def load(self, path: Optional[PathLike] = None) -> PersistResult:
        """
        Replace the catalog with the products stored in a JSON file.

        Args:
            path: Source file (defaults to products_file)

        Returns:
            PersistResult with status LOADED, NOT_FOUND, or FAILED with an
            IO_FAILURE / PARSE_FAILURE. On FAILED the catalog is unchanged.
        """
        source = Path(path) if path is not None else self._products_file

        try:
            products, skipped = self._read(source)
        except FileNotFoundError:
            logger.info(f"Products file not found: {source}")
            return PersistResult(status=PersistStatus.NOT_FOUND, path=str(source))
        except AppException as error:
            logger.error(f"Error loading products: {error.message}")
            return PersistResult(status=PersistStatus.FAILED, path=str(source), error=error)

        self._products = products

        logger.info(f"✅ Loaded {len(products)} products from {source}")
        return PersistResult(
            status=PersistStatus.LOADED,
            path=str(source),
            count=len(products),
            skipped=skipped
        )

    def reload(self) -> PersistResult:
        """Reload catalog from the default file."""
        logger.info("Reloading product catalog...")
        return self.load()

    @staticmethod
    def _read(source: Path) -> Tuple[List[Product], int]:
        """
        Parse a catalog file into a new product list.

        Raises:
            FileNotFoundError: If the file does not exist
            AppException: IO_FAILURE or PARSE_FAILURE
        """
        try:
            text = source.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except UnicodeDecodeError as e:
            raise exceptions.parse_failure(str(source), f"not UTF-8 text ({e.reason})")
        except OSError as e:
            raise exceptions.io_failure(str(source), e.strerror or str(e))

        try:
            data = json.loads(text, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise exceptions.parse_failure(str(source), f"invalid JSON ({e.msg} at line {e.lineno})")
        except RecursionError:
            raise exceptions.parse_failure(str(source), "JSON nested too deeply")

        # A literal null is treated as an empty catalog
        if data is None:
            return [], 0

        if not isinstance(data, list):
            raise exceptions.parse_failure(str(source), "expected a JSON array of products")

        products: List[Product] = []
        seen = set()
        skipped = 0

        for index, item in enumerate(data):
            try:
                product = Product.model_validate(item)
            except ValidationError as e:
                raise exceptions.parse_failure(
                    str(source),
                    f"invalid product at index {index} ({e.error_count()} error(s))"
                )

            if product.key in seen:
                logger.warning(f"Skipping duplicate entry at index {index}: {product.name!r}")
                skipped += 1
                continue

            seen.add(product.key)
            products.append(product)

        return products, skipped

"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog items and catalog operation results.

==============================================================================
"""

from decimal import Decimal
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from product_catalog.core.exceptions import AppException


class Product(BaseModel):
    """
    Product model for catalog items.

    Immutable once constructed. Two products are the same catalog entry
    when their name and category match ignoring case.

    Attributes:
        name: Product display name
        category: Product category
        price: Unit price, never negative

    Example:
        >>> Product(name="Running Shoe", category="Shoes", price="59.90").key
        ('running shoe', 'shoes')
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    # Older catalog files use PascalCase keys
    name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("name", "ProductName"),
        description="Product name"
    )
    category: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("category", "Category"),
        description="Product category"
    )
    price: Decimal = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("price", "Price"),
        description="Unit price"
    )

    @property
    def key(self) -> Tuple[str, str]:
        """Case-insensitive identity of the product."""
        return self.name.casefold(), self.category.casefold()

    def matches(self, term: str) -> bool:
        """Check if name or category contains term, ignoring case."""
        needle = term.casefold()
        if not needle:
            return False
        return needle in self.name.casefold() or needle in self.category.casefold()

    def to_record(self) -> dict:
        """Convert to the JSON record stored in the catalog file."""
        return {"name": self.name, "category": self.category, "price": self.price}


class AddStatus(str, Enum):
    """Outcome of adding a product."""
    ADDED = "added"
    REJECTED = "rejected"


class AddResult(BaseModel):
    """
    Result of ProductCatalog.add().

    Attributes:
        status: ADDED or REJECTED
        product: The product that was offered
        conflict: Existing entry with the same key (rejections only)
        error: DUPLICATE_PRODUCT exception (rejections only)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: AddStatus
    product: Product
    conflict: Optional[Product] = None
    error: Optional[AppException] = None

    @property
    def added(self) -> bool:
        return self.status is AddStatus.ADDED


class ListingEntry(BaseModel):
    """A product in a price listing with its highlight flag."""

    product: Product
    highlighted: bool = False


class PriceListing(BaseModel):
    """
    Price-ascending view of the catalog.

    Attributes:
        entries: Products sorted by price, ties in insertion order
        total: Sum of the listed prices
        highlight: Term used for highlighting, if any
        matches_only: Entries are restricted to highlight matches
    """

    entries: List[ListingEntry] = Field(default_factory=list)
    total: Decimal = Decimal("0")
    highlight: Optional[str] = None
    matches_only: bool = False

    @property
    def products(self) -> List[Product]:
        return [entry.product for entry in self.entries]

    @property
    def highlighted_count(self) -> int:
        return sum(1 for entry in self.entries if entry.highlighted)

    def __len__(self) -> int:
        return len(self.entries)


class PersistStatus(str, Enum):
    """Outcome of a save or load."""
    SAVED = "saved"
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class PersistResult(BaseModel):
    """
    Result of ProductCatalog.save() / ProductCatalog.load().

    Attributes:
        status: Operation outcome
        path: File that was read or written
        count: Number of products written or loaded
        skipped: Duplicate entries dropped while loading
        error: IO_FAILURE or PARSE_FAILURE exception on failure
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: PersistStatus
    path: str
    count: int = 0
    skipped: int = 0
    error: Optional[AppException] = None

    @property
    def ok(self) -> bool:
        return self.status is not PersistStatus.FAILED

    @property
    def message(self) -> str:
        """Human-readable summary of the outcome."""
        if self.status is PersistStatus.SAVED:
            return f"Saved {self.count} product(s) to {self.path}."
        if self.status is PersistStatus.LOADED:
            return f"Loaded {self.count} product(s) from {self.path}."
        if self.status is PersistStatus.NOT_FOUND:
            return f"No previous product data found at {self.path}. Starting with an empty list."
        return self.error.message if self.error else f"Operation on {self.path} failed."

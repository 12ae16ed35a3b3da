"""
==============================================================================
Console Session Module
==============================================================================

Interactive prompt loop driving a ProductCatalog.

Session Flow:
------------
1. Load the catalog file and report the outcome
2. Add loop: name, category, price; the quit token ends the loop
3. Show the price-sorted listing, ask whether to add more
4. Optional search listing only the matching products, highlighted
5. Optional save

End of input (Ctrl-D) or Ctrl-C ends the session without saving.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from product_catalog.catalog import ProductCatalog, Product
from product_catalog.config import Settings, get_settings
from product_catalog.core import exceptions
from product_catalog.core.exceptions import AppException
from product_catalog.utils import ProductInputValidator

from .formatter import ConsoleFormatter, RED, YELLOW


# Module logger
logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


class ConsoleSession:
    """
    Interactive console session over a catalog.

    Input and output are injected so the session can be scripted.

    Attributes:
        _catalog: Catalog owned by this session
        _formatter: Renders rows and messages
        _validator: Validates typed product fields

    Example:
        >>> session = ConsoleSession(ProductCatalog("products.json"))
        >>> exit_code = session.run()
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        settings: Optional[Settings] = None,
        input_func: Optional[InputFunc] = None,
        output_func: Optional[OutputFunc] = None
    ) -> None:
        self._settings = settings or get_settings()
        self._catalog = catalog
        self._input = input_func or input
        self._output = output_func or print
        self._formatter = ConsoleFormatter(
            use_color=self._settings.use_color,
            currency_symbol=self._settings.currency_symbol
        )
        self._validator = ProductInputValidator(currency_symbol=self._settings.currency_symbol)

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    # =========================================================================
    # ENTRY POINT
    # =========================================================================

    def run(self) -> int:
        """
        Run the full session.

        Returns:
            Process exit code (always 0)
        """
        try:
            self._run()
        except (EOFError, KeyboardInterrupt):
            self._output("")
            self._output("Session ended without saving.")
            logger.info("Session interrupted by user")
        return 0

    def _run(self) -> None:
        self.load()

        while True:
            self.add_products()
            self.display()
            if not self.confirm("\nDo you want to add more products?"):
                break

        self.perform_search()

        if self.confirm("\nDo you want to save the product list?"):
            self.save()

    # =========================================================================
    # STEPS
    # =========================================================================

    def load(self) -> None:
        result = self._catalog.load()
        if result.ok:
            self._output(result.message)
        else:
            self._output(f"Error loading products: {self._formatter.error(result.message)}")

    def save(self) -> None:
        result = self._catalog.save()
        if result.ok:
            self._output("Products successfully saved to file.")
        else:
            self._output(f"Error saving products: {self._formatter.error(result.message)}")

    def add_products(self) -> None:
        """Prompt for products until the quit token is entered."""
        quit_hint = self._formatter.color(repr(self._settings.quit_token), RED)

        while True:
            self._output(f"\nEnter product details or write {quit_hint} to quit:")

            raw_name = self._input("Product Name: ")
            if raw_name.strip().lower() == self._settings.quit_token:
                break

            try:
                product = self._read_product(raw_name)
            except AppException as e:
                self._output(self._formatter.error(f"{e.message}. Please try again."))
                continue

            result = self._catalog.add(product)
            if result.added:
                self._output("Product added successfully!")
            else:
                self._output(self._formatter.duplicate(result.product))

    def _read_product(self, raw_name: str) -> Product:
        """
        Read category and price after the name.

        Stops at the first invalid field so the user starts over.

        Raises:
            AppException: VALIDATION_ERROR
        """
        is_valid, name, error = self._validator.validate_name(raw_name)
        if not is_valid:
            raise exceptions.validation_error("product name", error)

        is_valid, category, error = self._validator.validate_category(self._input("Category: "))
        if not is_valid:
            raise exceptions.validation_error("category", error)

        is_valid, price, error = self._validator.validate_price(self._input("Price: "))
        if not is_valid:
            raise exceptions.validation_error("price", error)

        return Product(name=name, category=category, price=price)

    def display(self, highlight: Optional[str] = None, matches_only: bool = False) -> None:
        listing = self._catalog.list_sorted_by_price(highlight=highlight, matches_only=matches_only)
        for line in self._formatter.listing(listing):
            self._output(line)

    def perform_search(self) -> None:
        if not self.confirm("\nWould you like to search for a product?"):
            return

        term = self._input(f"Enter search term {self._formatter.color('(Product name or Category)', YELLOW)}: ")
        if not term.strip():
            self._output("Search term cannot be empty.")
            return

        matches = self._catalog.search(term)
        self._output("")
        self._output(self._formatter.search_summary(len(matches), term))

        if matches:
            self.display(highlight=term, matches_only=True)

    def confirm(self, question: str) -> bool:
        answer = self._input(self._formatter.prompt_choice(question))
        return answer.strip().lower() in {"y", "yes"}

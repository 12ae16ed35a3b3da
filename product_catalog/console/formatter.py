"""
==============================================================================
Console Formatter Module
==============================================================================

Text rendering for products, price listings and status messages.

Colors:
-------
- Product name: red
- Category: green
- Price: yellow
- Highlighted rows and totals: bright yellow

Plain text is produced when colors are disabled.

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from product_catalog.catalog.models import PriceListing, Product


RESET = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BRIGHT_YELLOW = "\x1b[93m"


class ConsoleFormatter:
    """
    Renders catalog data as console lines.

    Example:
        >>> formatter = ConsoleFormatter(use_color=False)
        >>> formatter.price(Decimal("1234.5"))
        '$1,234.50'
    """

    def __init__(self, use_color: bool = True, currency_symbol: str = "$") -> None:
        self._use_color = use_color
        self._currency_symbol = currency_symbol

    def color(self, text: str, code: str) -> str:
        """Wrap text in an ANSI color code when colors are enabled."""
        if not self._use_color:
            return text
        return f"{code}{text}{RESET}"

    def price(self, value: Decimal) -> str:
        return f"{self._currency_symbol}{value:,.2f}"

    def product(self, product: Product) -> str:
        """Render a single product row."""
        return (
            f"Product name: {self.color(product.name, RED)} "
            f"Category: {self.color(product.category, GREEN)} "
            f"Price: {self.color(self.price(product.price), YELLOW)}"
        )

    def listing(self, listing: PriceListing) -> List[str]:
        """
        Render a price listing with its header and total.

        Highlighted entries are wrapped in bright yellow. With colors off
        they are prefixed with an asterisk instead.
        """
        if not listing.entries:
            return ["No products added."]

        lines = ["", f"Products List {self.color('(Sorted by Price)', YELLOW)}:"]

        for entry in listing.entries:
            row = self.product(entry.product)
            if entry.highlighted:
                row = self.color(row, BRIGHT_YELLOW) if self._use_color else f"* {row}"
            elif not self._use_color and listing.highlight:
                row = f"  {row}"
            lines.append(row)

        lines.append("")
        label = "Total Price of matching products" if listing.matches_only else "Total Price of all products"
        lines.append(f"{label}: {self.color(self.price(listing.total), BRIGHT_YELLOW)}")
        return lines

    def duplicate(self, product: Product) -> str:
        return (
            f"A product with the name: {self.color(repr(product.name), RED)} "
            f"and category: {self.color(repr(product.category), GREEN)} already exists."
        )

    def search_summary(self, count: int, term: str) -> str:
        if count == 0:
            return f"No products found matching {self.color(repr(term), GREEN)}."
        return f"Found {self.color(str(count), RED)} product(s) matching {self.color(repr(term), GREEN)}:"

    def error(self, message: str) -> str:
        return self.color(message, BRIGHT_YELLOW)

    def prompt_choice(self, question: str) -> str:
        return f"{question} {self.color('(y/n)', RED)}: "

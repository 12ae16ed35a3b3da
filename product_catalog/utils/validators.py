"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation for raw product input typed at the console.

This module implements:
- ProductInputValidator: Validates product name, category and price

Validation Rules:
----------------
- Name and category: non-empty after stripping whitespace
- Price: decimal number, optional leading currency symbol, comma
  thousands separators ("1,234.50") or a decimal comma ("4,50"), not
  negative, finite

==============================================================================
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple


class ProductInputValidator:
    """
    Validator for product fields entered at the console.

    Each validate_* method returns a tuple of
    (is_valid, normalized_value, error_message).

    Example:
        >>> validator = ProductInputValidator(currency_symbol="$")
        >>> validator.validate_price("$4,50")
        (True, Decimal('4.50'), None)
    """

    # Comma followed by groups of exactly three digits, e.g. "1,234.50"
    THOUSANDS_PATTERN = re.compile(r"^\d{1,3}(,\d{3})+(\.\d+)?$")

    def __init__(self, currency_symbol: str = "$", lowercase: bool = True) -> None:
        """
        Args:
            currency_symbol: Symbol allowed in front of a price
            lowercase: Store names and categories lowercased
        """
        self._currency_symbol = currency_symbol
        self._lowercase = lowercase

    def _validate_text(self, value: Optional[str], label: str) -> Tuple[bool, Optional[str], Optional[str]]:
        if value is None or not value.strip():
            return False, None, f"{label} cannot be empty"

        normalized = value.strip()
        if self._lowercase:
            normalized = normalized.lower()

        return True, normalized, None

    def validate_name(self, name: Optional[str]) -> Tuple[bool, Optional[str], Optional[str]]:
        """Validate and normalize a product name."""
        return self._validate_text(name, "Product name")

    def validate_category(self, category: Optional[str]) -> Tuple[bool, Optional[str], Optional[str]]:
        """Validate and normalize a category."""
        return self._validate_text(category, "Category")

    def validate_price(self, price: Optional[str]) -> Tuple[bool, Optional[Decimal], Optional[str]]:
        """
        Parse and validate a price.

        Args:
            price: Raw price input

        Returns:
            Tuple of (is_valid, price, error_message)
        """
        if price is None or not price.strip():
            return False, None, "Price is required"

        raw = price.strip()
        if self._currency_symbol and raw.startswith(self._currency_symbol):
            raw = raw[len(self._currency_symbol):].strip()

        if self.THOUSANDS_PATTERN.match(raw):
            raw = raw.replace(",", "")
        elif raw.count(",") == 1 and "." not in raw:
            # Decimal comma, e.g. "4,50"
            raw = raw.replace(",", ".")

        try:
            value = Decimal(raw)
        except InvalidOperation:
            return False, None, "Price must be a number"

        if not value.is_finite():
            return False, None, "Price must be a finite number"

        if value < 0:
            return False, None, "Price cannot be negative"

        return True, value, None

    def is_valid_price(self, price: Optional[str]) -> bool:
        """Quick validation check."""
        is_valid, _, _ = self.validate_price(price)
        return is_valid


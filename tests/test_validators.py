"""
==============================================================================
Validator Tests
==============================================================================

Tests for console input validation.

==============================================================================
"""

from decimal import Decimal

import pytest

from product_catalog.utils import ProductInputValidator


@pytest.fixture
def validator() -> ProductInputValidator:
    return ProductInputValidator(currency_symbol="$")


class TestTextValidation:
    """Tests for name and category validation."""

    def test_valid_name_is_lowercased(self, validator):
        """Test names are stripped and lowercased."""
        assert validator.validate_name("  Running Shoe ") == (True, "running shoe", None)

    def test_case_can_be_kept(self):
        """Test lowercase=False keeps the typed case."""
        validator = ProductInputValidator(lowercase=False)
        assert validator.validate_category("Shoes") == (True, "Shoes", None)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values_fail(self, validator, value):
        """Test blank input is invalid."""
        is_valid, normalized, error = validator.validate_category(value)
        assert is_valid is False
        assert normalized is None
        assert error == "Category cannot be empty"


class TestPriceValidation:
    """Tests for price parsing."""

    @pytest.mark.parametrize("raw, expected", [
        ("4.50", Decimal("4.50")),
        (" 12 ", Decimal("12")),
        ("$3.99", Decimal("3.99")),
        ("4,50", Decimal("4.50")),
        ("1,234", Decimal("1234")),
        ("$1,234.50", Decimal("1234.50")),
        ("1,234,567.89", Decimal("1234567.89")),
        ("0", Decimal("0")),
    ])
    def test_valid_prices(self, validator, raw, expected):
        """Test accepted price formats."""
        is_valid, value, error = validator.validate_price(raw)
        assert is_valid is True
        assert value == expected
        assert error is None

    @pytest.mark.parametrize("raw, message", [
        ("", "Price is required"),
        ("abc", "Price must be a number"),
        ("1,000,00", "Price must be a number"),
        ("NaN", "Price must be a finite number"),
        ("Infinity", "Price must be a finite number"),
        ("-5", "Price cannot be negative"),
    ])
    def test_invalid_prices(self, validator, raw, message):
        """Test rejected price input."""
        is_valid, value, error = validator.validate_price(raw)
        assert is_valid is False
        assert value is None
        assert error == message

    def test_is_valid_price(self, validator):
        """Test quick check."""
        assert validator.is_valid_price("1.5") is True
        assert validator.is_valid_price("one") is False

"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog files, catalogs, settings and scripted console input.

==============================================================================
"""

import json
from decimal import Decimal
from pathlib import Path
from typing import List

import pytest

from product_catalog.catalog import Product, ProductCatalog
from product_catalog.config import Settings, get_settings


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test start from a fresh settings instance."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def plain_settings() -> Settings:
    """Settings with colors off and no .env lookup."""
    return Settings(_env_file=None, use_color=False)


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def products_file(tmp_path: Path) -> Path:
    """Path to a catalog file that does not exist yet."""
    return tmp_path / "products.json"


@pytest.fixture
def catalog(products_file: Path) -> ProductCatalog:
    """Empty catalog bound to a temporary file."""
    return ProductCatalog(products_file)


@pytest.fixture
def sample_products() -> List[Product]:
    """Products priced 9.99, 1.50, 1.50, 20.00 in that insertion order."""
    return [
        Product(name="Notebook", category="Stationery", price=Decimal("9.99")),
        Product(name="Pencil", category="Stationery", price=Decimal("1.50")),
        Product(name="Eraser", category="Stationery", price=Decimal("1.50")),
        Product(name="Running Shoe", category="Sport", price=Decimal("20.00")),
    ]


@pytest.fixture
def filled_catalog(catalog: ProductCatalog, sample_products: List[Product]) -> ProductCatalog:
    """Catalog holding the sample products."""
    for product in sample_products:
        catalog.add(product)
    return catalog


@pytest.fixture
def write_json(products_file: Path):
    """Write raw data to the catalog file."""
    def _write(data) -> Path:
        text = data if isinstance(data, str) else json.dumps(data)
        products_file.write_text(text, encoding="utf-8")
        return products_file
    return _write


# ============================================================================
# CONSOLE FIXTURES
# ============================================================================

class ScriptedInput:
    """Input function replaying answers; raises EOFError when exhausted."""

    def __init__(self, answers: List[str]) -> None:
        self._answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput instances."""
    return ScriptedInput


@pytest.fixture
def output_lines() -> List[str]:
    """Collected console output lines."""
    return []

"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Cached global instance via get_settings()

Configuration Priority (highest to lowest):
------------------------------------------
1. Command line overrides (see product_catalog.main)
2. Environment variables
3. .env file
4. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name shown in the console banner
        debug: Enable verbose logging
        products_file: Path to the catalog JSON file
        use_color: Render console output with ANSI colors
        currency_symbol: Symbol prefixed to formatted prices
        quit_token: Name entry that ends the add loop

    Example:
        >>> settings = Settings(use_color=False)
        >>> settings.products_path
        PosixPath('products.json')
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        # Load from .env file if present
        env_file=".env",
        env_file_encoding="utf-8",
        # Environment variables are case-insensitive
        case_sensitive=False,
        # Ignore extra environment variables
        extra="ignore",
        # Validate default values
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Catalog",
        description="Display name shown in the console banner"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    products_file: str = Field(
        default="products.json",
        min_length=1,
        description="Path to product catalog JSON"
    )

    # =========================================================================
    # CONSOLE SETTINGS
    # =========================================================================
    use_color: bool = Field(
        default=True,
        description="Render console output with ANSI colors"
    )

    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Currency symbol for formatted prices"
    )

    quit_token: str = Field(
        default="q",
        description="Product name entry that ends the add loop"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("quit_token")
    @classmethod
    def validate_quit_token(cls, value: str) -> str:
        """
        Normalize the quit token.

        Raises:
            ValueError: If the token is blank
        """
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("quit_token cannot be blank")
        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def products_path(self) -> Path:
        """Get products file as Path object."""
        return Path(self.products_file)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"products_file={self.products_file!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Cached Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.debug(f"Configuration loaded: {settings!r}")

    return settings

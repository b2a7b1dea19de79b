"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file.

Files that USE this module:
- fxquote.app (base currency, default fee, currencies file and logging setup)
- tests.test_settings (unit tests)

Files that this module USES:
- fxquote.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library logging, for level name lookup
from decimal import Decimal  # Exact decimal type for the default fee
from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fxquote.domain.models import normalize_code  # ISO code normalization shared with lookups
from fxquote.shared.validators import (
    validate_iso_code,  # Validate three-letter currency codes
    validate_log_level,  # Validate logging level names
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Conversion ---
    base_currency: str = Field(default="USD", alias="FXQUOTE_BASE_CURRENCY")
    default_fee: Decimal = Field(default=Decimal(0), alias="FXQUOTE_DEFAULT_FEE", ge=0)
    currencies_file: Optional[Path] = Field(default=None, alias="FXQUOTE_CURRENCIES_FILE")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="FXQUOTE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelName(self.log_level)

    @field_validator("base_currency")
    @classmethod
    def validate_base_currency(cls, v: str) -> str:
        """Validate and upper-case the base currency code."""
        if not validate_iso_code(v):
            raise ValueError("FXQUOTE_BASE_CURRENCY must be a three-letter currency code")
        return normalize_code(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        if not validate_log_level(v):
            raise ValueError("LOG_LEVEL must be a logging level name such as INFO or DEBUG")
        return v.strip().upper()


# Global settings instance
settings = Settings()

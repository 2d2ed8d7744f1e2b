"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Ledger engine configuration."""

    model_config = SettingsConfigDict(env_prefix="LEDGER_")

    # Display name of the walk-in sentinel customer
    walk_in_customer_name: str = "Walk-in Customer"

    # Sale defaults (percentages, 0-100 suggested)
    default_tax_rate: float = 0.0
    default_discount_percent: float = 0.0
    sale_id_prefix: str = "SALE"

    # Reporting
    dashboard_limit: int = 5
    uncategorized_label: str = "Uncategorized"

    # Presentation rounding only, stored values keep full precision
    money_decimals: int = 2

    seed_demo_data: bool = False

    @field_validator("dashboard_limit", "money_decimals")
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0")
        return v


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Retail Back Office"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    ledger: LedgerSettings = Field(default_factory=LedgerSettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None

"""Configuration module."""

from backoffice.config.logging import configure_logging, get_logger
from backoffice.config.settings import LedgerSettings, Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "LedgerSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]

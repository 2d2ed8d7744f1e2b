"""Retail back-office ledger: inventory, products, sales and customers."""

__version__ = "1.0.0"

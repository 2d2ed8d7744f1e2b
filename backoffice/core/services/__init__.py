"""Domain services - the ledger engine."""

from backoffice.core.services.bom_costing import (
    CostBreakdown,
    breakdown_production_cost,
    compute_production_cost,
    compute_profit_margin,
    compute_profit_per_item,
    resolve_inventory_item,
)
from backoffice.core.services.customer_accrual import CustomerAccrualService
from backoffice.core.services.money import format_money, round_money
from backoffice.core.services.reporting import ReportingService
from backoffice.core.services.sale_builder import DraftState, SaleDraft, SaleTransactionBuilder
from backoffice.core.services.stock_ledger import StockLedger, check_availability, is_low_stock

__all__ = [
    # BOM costing
    "CostBreakdown",
    "breakdown_production_cost",
    "compute_production_cost",
    "compute_profit_margin",
    "compute_profit_per_item",
    "resolve_inventory_item",
    # Stock
    "StockLedger",
    "check_availability",
    "is_low_stock",
    # Sales
    "DraftState",
    "SaleDraft",
    "SaleTransactionBuilder",
    # Customers
    "CustomerAccrualService",
    # Reporting
    "ReportingService",
    # Money
    "round_money",
    "format_money",
]

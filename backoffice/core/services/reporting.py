"""
Reporting and aggregation engine.

Pure, read-only projections over entity collections. Nothing here
mutates state or caches results; every view is recomputed from the
snapshot it is given.

Voided sales are counted by top_products and sales_metrics unless the
caller passes include_voided=False.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, TypeVar

from backoffice.config import get_logger, get_settings
from backoffice.core.entities.base import parse_timestamp
from backoffice.core.entities.customer import WALK_IN_CUSTOMER_ID, Customer, CustomerType
from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.product import Product
from backoffice.core.entities.sale import Sale, SaleStatus
from backoffice.core.interfaces.ledger_store import ILedgerStore, LedgerSnapshot
from backoffice.core.services.stock_ledger import is_low_stock

logger = get_logger(__name__)

R = TypeVar("R")


@dataclass
class TopProduct:
    product: Product
    total_sold: float


@dataclass
class ItemValue:
    item_id: str
    name: str
    category: str
    value: float


@dataclass
class InventoryValuation:
    """Stock value per item, in total, and per category."""

    items: list[ItemValue] = field(default_factory=list)
    total: float = 0.0
    by_category: dict[str, float] = field(default_factory=dict)


@dataclass
class SalesMetrics:
    total_sales: int
    total_revenue: float
    average_sale_value: float


@dataclass
class CustomerSummary:
    active_customers: int
    total_revenue: float
    average_spent: float


@dataclass
class ProductStockValue:
    """Finished-goods stock valued at selling price and at production cost."""

    retail_value: float
    cost_value: float


@dataclass
class Dashboard:
    low_stock: list[InventoryItem]
    recent_sales: list[Sale]
    top_products: list[TopProduct]
    top_customers: list[Customer]
    inventory_value: float
    total_revenue: float


def _limit(n: int | None) -> int:
    return get_settings().ledger.dashboard_limit if n is None else n


def low_stock_items(inventory: Iterable[InventoryItem]) -> list[InventoryItem]:
    return [item for item in inventory if is_low_stock(item)]


def recent_sales(sales: Iterable[Sale], n: int | None = None) -> list[Sale]:
    """Newest first by created_at."""
    ordered = sorted(sales, key=lambda s: parse_timestamp(s.created_at), reverse=True)
    return ordered[: _limit(n)]


def top_products(
    sales: Iterable[Sale],
    products: Iterable[Product],
    n: int | None = None,
    include_voided: bool = True,
) -> list[TopProduct]:
    """Products ranked by units sold across sales.

    Sold product ids that no longer resolve are dropped.
    """
    sold: dict[str, float] = {}
    for sale in sales:
        if not include_voided and sale.status == SaleStatus.VOIDED:
            continue
        for item in sale.items:
            sold[item.product_id] = sold.get(item.product_id, 0) + item.quantity

    by_id = {p.id: p for p in products}
    ranked = [
        TopProduct(product=by_id[product_id], total_sold=total)
        for product_id, total in sold.items()
        if product_id in by_id
    ]
    dropped = len(sold) - len(ranked)
    if dropped:
        logger.debug("top_products_unresolved", count=dropped)
    ranked.sort(key=lambda t: t.total_sold, reverse=True)
    return ranked[: _limit(n)]


def top_customers(customers: Iterable[Customer], n: int | None = None) -> list[Customer]:
    """Highest spenders, excluding the walk-in sentinel and zero spenders."""
    eligible = [
        c for c in customers if c.id != WALK_IN_CUSTOMER_ID and c.total_spent != 0
    ]
    eligible.sort(key=lambda c: c.total_spent, reverse=True)
    return eligible[: _limit(n)]


def inventory_valuation(
    inventory: Iterable[InventoryItem], uncategorized_label: str | None = None
) -> InventoryValuation:
    label = uncategorized_label or get_settings().ledger.uncategorized_label
    valuation = InventoryValuation()
    for item in inventory:
        category = item.category or label
        value = item.quantity * item.cost_per_unit
        valuation.items.append(
            ItemValue(item_id=item.id, name=item.name, category=category, value=value)
        )
        valuation.total += value
        valuation.by_category[category] = valuation.by_category.get(category, 0.0) + value
    return valuation


def sales_metrics(sales: Iterable[Sale], include_voided: bool = True) -> SalesMetrics:
    counted = [
        s for s in sales if include_voided or s.status != SaleStatus.VOIDED
    ]
    total_revenue = sum(s.total_amount for s in counted)
    average = total_revenue / len(counted) if counted else 0.0
    return SalesMetrics(
        total_sales=len(counted),
        total_revenue=total_revenue,
        average_sale_value=average,
    )


def customer_summary(customers: Iterable[Customer]) -> CustomerSummary:
    """Revenue across all customers, averaged over the active ones."""
    customers = list(customers)
    active = sum(1 for c in customers if c.is_active)
    total = sum(c.total_spent for c in customers)
    return CustomerSummary(
        active_customers=active,
        total_revenue=total,
        average_spent=total / active if active else 0.0,
    )


def product_stock_value(products: Iterable[Product]) -> ProductStockValue:
    retail = 0.0
    cost = 0.0
    for product in products:
        retail += product.quantity * product.selling_price
        cost += product.quantity * product.production_cost
    return ProductStockValue(retail_value=retail, cost_value=cost)


# Listing helpers


def _matches(term: str, *values: str | None) -> bool:
    needle = term.strip().lower()
    if not needle:
        return True
    return any(needle in (v or "").lower() for v in values)


def search_inventory(inventory: Iterable[InventoryItem], term: str) -> list[InventoryItem]:
    return [item for item in inventory if _matches(term, item.name, item.sku)]


def search_products(products: Iterable[Product], term: str) -> list[Product]:
    return [p for p in products if _matches(term, p.name, p.sku)]


def filter_customers(
    customers: Iterable[Customer],
    term: str = "",
    customer_type: CustomerType | None = None,
) -> list[Customer]:
    return [
        c
        for c in customers
        if _matches(term, c.name, c.email, c.phone)
        and (customer_type is None or c.customer_type == customer_type)
    ]


def filter_sales(
    sales: Iterable[Sale],
    term: str = "",
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[Sale]:
    """Match id or customer name; dates are inclusive calendar days (UTC)."""
    result = []
    for sale in sales:
        if not _matches(term, sale.id, sale.customer_name):
            continue
        created = parse_timestamp(sale.created_at)
        if start_date and created < _day_start(start_date, created):
            continue
        if end_date and created >= _day_start(end_date + timedelta(days=1), created):
            continue
        result.append(sale)
    return result


def _day_start(day: date, like: datetime) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=like.tzinfo)


def sort_records(
    records: Sequence[R], field_name: str, descending: bool = False
) -> list[R]:
    """Sort entities by one attribute; None values sort last."""

    def key(record: Any) -> Any:
        value = getattr(record, field_name)
        return value.lower() if isinstance(value, str) else value

    present = [r for r in records if getattr(r, field_name) is not None]
    missing = [r for r in records if getattr(r, field_name) is None]
    return sorted(present, key=key, reverse=descending) + missing


class ReportingService:
    """Dashboard views computed from a fresh snapshot of the ledger."""

    def __init__(self, store: ILedgerStore):
        self._store = store

    def snapshot(self) -> LedgerSnapshot:
        return self._store.snapshot()

    def dashboard(self, n: int | None = None) -> Dashboard:
        snap = self._store.snapshot()
        dashboard = Dashboard(
            low_stock=low_stock_items(snap.inventory),
            recent_sales=recent_sales(snap.sales, n),
            top_products=top_products(snap.sales, snap.products, n),
            top_customers=top_customers(snap.customers, n),
            inventory_value=inventory_valuation(snap.inventory).total,
            total_revenue=sales_metrics(snap.sales).total_revenue,
        )
        logger.info(
            "dashboard_built",
            low_stock=len(dashboard.low_stock),
            sales=len(snap.sales),
        )
        return dashboard

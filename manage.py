#!/usr/bin/env python3
"""
Back-office management CLI.

Runs read-only reports over a ledger seeded with the demo bakery data.

Usage:
    python manage.py dashboard        Low stock, recent sales, top products/customers
    python manage.py low-stock        Inventory items at or below reorder level
    python manage.py valuation        Inventory value by category
    python manage.py products         Products with production cost and margin
    python manage.py sales            Sales list (filter with --search/--from/--to)
    python manage.py customers        Customer list and summary
"""

import argparse
import sys
from datetime import date

from backoffice.config import configure_logging
from backoffice.core.entities.customer import CustomerType
from backoffice.core.interfaces import ILedgerStore
from backoffice.core.services import reporting
from backoffice.core.services.bom_costing import compute_profit_margin
from backoffice.core.services.money import format_money
from backoffice.infrastructure.storage.memory import LedgerStore, seed_demo_data

PRODUCT_SORT_FIELDS = ["name", "sku", "selling_price", "production_cost", "quantity"]


def _build_store() -> ILedgerStore:
    store = LedgerStore()
    seed_demo_data(store)
    return store


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (expected YYYY-MM-DD): {value}")


def cmd_dashboard(args: argparse.Namespace, store: ILedgerStore) -> None:
    """Print the dashboard views."""
    dash = reporting.ReportingService(store).dashboard(args.limit)

    print(f"Inventory value: {format_money(dash.inventory_value)}")
    print(f"Total revenue:   {format_money(dash.total_revenue)}")

    print("\nLow stock:")
    for item in dash.low_stock:
        print(f"  {item.name:<20} {item.quantity:g} {item.unit} (reorder at {item.reorder_level:g})")
    if not dash.low_stock:
        print("  (none)")

    print("\nRecent sales:")
    for sale in dash.recent_sales:
        print(f"  {sale.id:<12} {sale.customer_name:<20} {format_money(sale.total_amount):>10}  {sale.status.value}")

    print("\nTop products:")
    for top in dash.top_products:
        print(f"  {top.product.name:<20} {top.total_sold:g} sold")

    print("\nTop customers:")
    for customer in dash.top_customers:
        print(f"  {customer.name:<20} {format_money(customer.total_spent):>10}")


def cmd_low_stock(args: argparse.Namespace, store: ILedgerStore) -> None:
    items = reporting.low_stock_items(store.inventory.list_all())
    if not items:
        print("No items at or below reorder level.")
        return
    for item in items:
        print(f"{item.sku:<8} {item.name:<20} {item.quantity:g} {item.unit} (reorder at {item.reorder_level:g})")


def cmd_valuation(args: argparse.Namespace, store: ILedgerStore) -> None:
    valuation = reporting.inventory_valuation(store.inventory.list_all())
    for category, value in sorted(valuation.by_category.items()):
        print(f"{category:<20} {format_money(value):>12}")
    print(f"{'Total':<20} {format_money(valuation.total):>12}")


def cmd_products(args: argparse.Namespace, store: ILedgerStore) -> None:
    products = reporting.search_products(store.products.list_all(), args.search)
    for product in reporting.sort_records(products, args.sort, args.desc):
        margin = compute_profit_margin(product.selling_price, product.production_cost)
        print(
            f"{product.sku:<8} {product.name:<20} "
            f"price {format_money(product.selling_price):>8}  "
            f"cost {format_money(product.production_cost):>8}  "
            f"margin {margin:5.1f}%  stock {product.quantity:g}"
        )
    stock = reporting.product_stock_value(products)
    print(f"\nStock at retail: {format_money(stock.retail_value)}")
    print(f"Stock at cost:   {format_money(stock.cost_value)}")


def cmd_sales(args: argparse.Namespace, store: ILedgerStore) -> None:
    sales = reporting.filter_sales(
        store.sales.list_all(),
        term=args.search,
        start_date=args.start,
        end_date=args.end,
    )
    for sale in reporting.sort_records(sales, "created_at", descending=True):
        print(
            f"{sale.created_at[:10]}  {sale.id:<12} {sale.customer_name:<20} "
            f"{len(sale.items)} items  {format_money(sale.total_amount):>10}  {sale.status.value}"
        )
    metrics = reporting.sales_metrics(sales, include_voided=not args.exclude_voided)
    print(
        f"\n{metrics.total_sales} sales, revenue {format_money(metrics.total_revenue)}, "
        f"average {format_money(metrics.average_sale_value)}"
    )


def cmd_customers(args: argparse.Namespace, store: ILedgerStore) -> None:
    customer_type = CustomerType(args.type) if args.type else None
    customers = reporting.filter_customers(store.customers.list_all(), args.search, customer_type)
    for customer in customers:
        status = "active" if customer.is_active else "inactive"
        print(
            f"{customer.id:<12} {customer.name:<20} {customer.customer_type.value:<10} "
            f"{customer.total_purchases:>3} purchases  {format_money(customer.total_spent):>10}  {status}"
        )
    summary = reporting.customer_summary(customers)
    print(
        f"\n{summary.active_customers} active, revenue {format_money(summary.total_revenue)}, "
        f"average {format_money(summary.average_spent)}"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Back-office management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override LOG_LEVEL for this run",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # dashboard
    p_dash = sub.add_parser("dashboard", help="Show dashboard views")
    p_dash.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Entries per ranked list (default: LEDGER_DASHBOARD_LIMIT)",
    )
    p_dash.set_defaults(func=cmd_dashboard)

    # low-stock
    p_low = sub.add_parser("low-stock", help="List low-stock inventory items")
    p_low.set_defaults(func=cmd_low_stock)

    # valuation
    p_val = sub.add_parser("valuation", help="Inventory value by category")
    p_val.set_defaults(func=cmd_valuation)

    # products
    p_prod = sub.add_parser("products", help="List products with margins")
    p_prod.add_argument("--search", default="", help="Match name or SKU")
    p_prod.add_argument(
        "--sort",
        default="name",
        choices=PRODUCT_SORT_FIELDS,
        help="Field to sort by (default: name)",
    )
    p_prod.add_argument("--desc", action="store_true", help="Sort descending")
    p_prod.set_defaults(func=cmd_products)

    # sales
    p_sales = sub.add_parser("sales", help="List sales")
    p_sales.add_argument("--search", default="", help="Match sale id or customer name")
    p_sales.add_argument("--from", dest="start", type=_parse_date, help="First day (YYYY-MM-DD)")
    p_sales.add_argument("--to", dest="end", type=_parse_date, help="Last day (YYYY-MM-DD)")
    p_sales.add_argument(
        "--exclude-voided", action="store_true", help="Leave voided sales out of the totals"
    )
    p_sales.set_defaults(func=cmd_sales)

    # customers
    p_cust = sub.add_parser("customers", help="List customers")
    p_cust.add_argument("--search", default="", help="Match name, email or phone")
    p_cust.add_argument(
        "--type",
        choices=[t.value for t in CustomerType],
        help="Only customers of this type",
    )
    p_cust.set_defaults(func=cmd_customers)

    args = parser.parse_args(argv)
    configure_logging(log_level=args.log_level)
    args.func(args, _build_store())
    return 0


if __name__ == "__main__":
    sys.exit(main())

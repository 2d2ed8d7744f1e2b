"""Tests for sale entities."""

import pytest

from backoffice.core.entities.sale import (
    Sale,
    SaleItem,
    SaleStatus,
    compute_sale_totals,
)


def _items() -> list[SaleItem]:
    return [
        SaleItem(product_id="p1", product_name="Chocolate Cake", quantity=1, unit_price=25.99),
        SaleItem(product_id="p2", product_name="Vanilla Cupcake", quantity=2, unit_price=3.99),
    ]


class TestSaleItem:
    """Tests for SaleItem entity."""

    def test_compute_total_price(self):
        item = SaleItem(product_id="p1", product_name="Bread", quantity=3, unit_price=4.5)
        assert item.total_price == 13.5

    def test_total_price_ignores_submitted_value(self):
        """total_price is always recomputed from quantity and unit_price."""
        item = SaleItem(
            product_id="p1", product_name="Bread", quantity=2, unit_price=4.5, total_price=99
        )
        assert item.total_price == 9.0


class TestComputeSaleTotals:
    """Tests for compute_sale_totals."""

    def test_tax_only(self):
        totals = compute_sale_totals(_items(), tax_rate=7, discount_percent=0)
        assert totals.subtotal == pytest.approx(33.97)
        assert totals.tax_amount == pytest.approx(2.3779)
        assert totals.discount_amount == 0
        assert totals.total_amount == pytest.approx(36.3479)

    def test_discount_taken_on_subtotal(self):
        """Tax and discount are both computed on the pre-tax subtotal."""
        items = [SaleItem(product_id="p", product_name="P", quantity=1, unit_price=100)]
        totals = compute_sale_totals(items, tax_rate=10, discount_percent=20)
        assert totals.tax_amount == pytest.approx(10)
        assert totals.discount_amount == pytest.approx(20)
        assert totals.total_amount == pytest.approx(90)

    def test_empty_items(self):
        totals = compute_sale_totals([], tax_rate=7, discount_percent=5)
        assert totals.subtotal == 0
        assert totals.total_amount == 0


class TestSale:
    """Tests for Sale entity."""

    def test_totals_computed_on_construction(self):
        sale = Sale(
            id="SALE-001",
            customer_id="customer1",
            customer_name="John Doe",
            items=_items(),
            tax_rate=7,
        )
        assert sale.subtotal == pytest.approx(33.97)
        assert sale.tax_amount == pytest.approx(2.3779)
        assert sale.total_amount == pytest.approx(36.3479)

    def test_defaults(self):
        sale = Sale(id="s", customer_id="walk-in", customer_name="Walk-in Customer")
        assert sale.status == SaleStatus.COMPLETED
        assert sale.items == []
        assert sale.total_amount == 0
        assert not sale.is_voided

    def test_is_voided(self):
        sale = Sale(id="s", customer_id="c", customer_name="C", status=SaleStatus.VOIDED)
        assert sale.is_voided

    def test_status_values(self):
        assert SaleStatus("Completed") == SaleStatus.COMPLETED
        assert SaleStatus("Voided") == SaleStatus.VOIDED
        assert SaleStatus("Pending") == SaleStatus.PENDING

"""Tests for RecordSaleUseCase, VoidSaleUseCase and AdjustStockUseCase."""

import pytest

from backoffice.application.dto import AdjustStockRequest, RecordSaleRequest, SaleLineRequest
from backoffice.application.use_cases import (
    AdjustStockUseCase,
    RecordSaleUseCase,
    VoidSaleUseCase,
)
from backoffice.core.entities.result import Outcome
from backoffice.core.entities.sale import SaleStatus


@pytest.fixture
def record_sale(stocked_store, id_generator) -> RecordSaleUseCase:
    return RecordSaleUseCase(store=stocked_store, id_generator=id_generator)


class TestRecordSaleUseCase:
    def test_records_sale(self, record_sale, stocked_store):
        request = RecordSaleRequest(
            customer_id="cust-1",
            items=[SaleLineRequest(product_id="prod-cake", quantity=2)],
            payment_method="Credit Card",
            tax_rate=7,
        )
        result = record_sale.execute(request)

        assert result.ok
        assert result.value.total_amount == pytest.approx(21.4)
        assert stocked_store.customers.get("cust-1").total_purchases == 1

    def test_repeated_lines_merge(self, record_sale):
        request = RecordSaleRequest(
            items=[
                SaleLineRequest(product_id="prod-cake", quantity=2),
                SaleLineRequest(product_id="prod-cake", quantity=2),
            ],
            payment_method="Cash",
        )
        result = record_sale.execute(request)
        assert len(result.value.items) == 1
        assert result.value.items[0].quantity == 4

    def test_rejected_line_writes_nothing(self, record_sale, stocked_store):
        request = RecordSaleRequest(
            items=[
                SaleLineRequest(product_id="prod-cake", quantity=3),
                SaleLineRequest(product_id="prod-cake", quantity=3),
            ],
            payment_method="Cash",
        )
        result = record_sale.execute(request)

        assert result.code == "INSUFFICIENT_STOCK"
        assert "items.1" in result.errors
        assert len(stocked_store.sales) == 0

    def test_missing_payment_method(self, record_sale):
        request = RecordSaleRequest(items=[SaleLineRequest(product_id="prod-cake", quantity=1)])
        result = record_sale.execute(request)
        assert result.errors == {"payment_method": "Select a payment method"}


class TestVoidSaleUseCase:
    def test_void(self, record_sale, stocked_store):
        sale = record_sale.execute(
            RecordSaleRequest(
                items=[SaleLineRequest(product_id="prod-cake", quantity=1)],
                payment_method="Cash",
            )
        ).value
        result = VoidSaleUseCase(store=stocked_store).execute(sale.id)
        assert result.value.status == SaleStatus.VOIDED

    def test_void_needs_no_id_generator(self, seeded_store):
        result = VoidSaleUseCase(store=seeded_store).execute("SALE-001")
        assert result.ok
        assert seeded_store.sales.get("SALE-001").status == SaleStatus.VOIDED


class TestAdjustStockUseCase:
    def test_increase_inventory(self, stocked_store):
        request = AdjustStockRequest(
            target="inventory", entity_id="inv-flour", quantity=5, direction="increase"
        )
        result = AdjustStockUseCase(store=stocked_store).execute(request)
        assert result.value.quantity == 55

    def test_decrease_product_clamps(self, stocked_store):
        request = AdjustStockRequest(
            target="product", entity_id="prod-cake", quantity=50, direction="decrease"
        )
        assert AdjustStockUseCase(store=stocked_store).execute(request).value.quantity == 0

    def test_unknown_entity(self, stocked_store):
        request = AdjustStockRequest(
            target="product", entity_id="ghost", quantity=1, direction="increase"
        )
        assert AdjustStockUseCase(store=stocked_store).execute(request).outcome == Outcome.NOT_FOUND

"""Tests for CustomerAccrualService."""

import pytest

from backoffice.core.entities.customer import WALK_IN_CUSTOMER_ID
from backoffice.core.entities.result import Outcome
from backoffice.core.services.customer_accrual import CustomerAccrualService


@pytest.fixture
def accrual(stocked_store) -> CustomerAccrualService:
    return CustomerAccrualService(stocked_store)


class TestAccruePurchase:
    def test_accrues_totals(self, accrual, stocked_store, clock):
        accrual.accrue_purchase("cust-1", 12.5)
        clock.advance(days=1)
        result = accrual.accrue_purchase("cust-1", 7.5)

        assert result.ok
        customer = stocked_store.customers.get("cust-1")
        assert customer.total_purchases == 2
        assert customer.total_spent == 20.0
        assert customer.last_purchase_date == "2024-01-02T00:00:00.000Z"

    def test_walk_in_rejected(self, accrual, stocked_store):
        result = accrual.accrue_purchase(WALK_IN_CUSTOMER_ID, 10)
        assert result.outcome == Outcome.REJECTED
        assert result.code == "SENTINEL_PROTECTED"
        assert stocked_store.customers.get(WALK_IN_CUSTOMER_ID).total_spent == 0

    def test_negative_amount_rejected(self, accrual):
        result = accrual.accrue_purchase("cust-1", -1)
        assert result.errors == {"amount": "Purchase amount cannot be negative"}

    def test_unknown_customer(self, accrual):
        assert accrual.accrue_purchase("ghost", 1).outcome == Outcome.NOT_FOUND


class TestLifecycle:
    def test_toggle_active(self, accrual, stocked_store):
        assert accrual.toggle_active("cust-1").value.is_active is False
        assert accrual.toggle_active("cust-1").value.is_active is True

    def test_toggle_walk_in_rejected(self, accrual, stocked_store):
        result = accrual.toggle_active(WALK_IN_CUSTOMER_ID)
        assert result.code == "SENTINEL_PROTECTED"
        assert stocked_store.customers.get(WALK_IN_CUSTOMER_ID).is_active

    def test_toggle_unknown(self, accrual):
        assert accrual.toggle_active("ghost").outcome == Outcome.NOT_FOUND

    def test_delete(self, accrual, stocked_store):
        assert accrual.delete("cust-1").ok
        assert stocked_store.customers.get("cust-1") is None

    def test_delete_walk_in_rejected(self, accrual, stocked_store):
        assert accrual.delete(WALK_IN_CUSTOMER_ID).code == "SENTINEL_PROTECTED"
        assert WALK_IN_CUSTOMER_ID in stocked_store.customers

    def test_active_customers(self, accrual):
        accrual.toggle_active("cust-1")
        assert [c.id for c in accrual.active_customers()] == [WALK_IN_CUSTOMER_ID]

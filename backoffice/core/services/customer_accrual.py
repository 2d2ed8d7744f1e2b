"""
Customer accrual service.

Maintains purchase statistics and the active flag of customers. The
walk-in sentinel is protected here as well as in the store, because
callers are presentation code and cannot be trusted to check.
"""

from backoffice.config import get_logger
from backoffice.core.entities.customer import WALK_IN_CUSTOMER_ID, Customer
from backoffice.core.entities.result import OperationResult
from backoffice.core.exceptions import (
    EntityNotFoundError,
    SentinelProtectedError,
    ValidationError,
)
from backoffice.core.interfaces.ledger_store import ILedgerStore

logger = get_logger(__name__)


class CustomerAccrualService:
    """Purchase-statistic accrual and lifecycle for customers."""

    def __init__(self, store: ILedgerStore):
        self._store = store

    def accrue_purchase(self, customer_id: str, amount: float) -> OperationResult[Customer]:
        """Count one purchase of `amount` against a customer.

        Not idempotent: invoke exactly once per completed sale. The
        walk-in sentinel never accrues statistics.
        """
        if customer_id == WALK_IN_CUSTOMER_ID:
            logger.info("accrual_skipped_walk_in", amount=amount)
            return OperationResult.from_error(
                SentinelProtectedError(customer_id, "accrue purchases for")
            )
        if amount < 0:
            return OperationResult.from_error(
                ValidationError({"amount": "Purchase amount cannot be negative"})
            )

        customer = self._store.customers.get(customer_id)
        if customer is None:
            logger.info("accrual_customer_not_found", customer_id=customer_id)
            return OperationResult.from_error(EntityNotFoundError("customer", customer_id))

        now = self._store.clock.now()
        result = self._store.customers.update(
            customer_id,
            total_purchases=customer.total_purchases + 1,
            total_spent=customer.total_spent + amount,
            last_purchase_date=now,
        )
        if result.ok:
            logger.info(
                "purchase_accrued",
                customer_id=customer_id,
                amount=amount,
                total_purchases=result.value.total_purchases,  # type: ignore[union-attr]
            )
        return result

    def toggle_active(self, customer_id: str) -> OperationResult[Customer]:
        """Flip is_active. Rejected for the walk-in sentinel."""
        if customer_id == WALK_IN_CUSTOMER_ID:
            logger.warning("toggle_rejected_walk_in")
            return OperationResult.from_error(SentinelProtectedError(customer_id, "deactivate"))

        customer = self._store.customers.get(customer_id)
        if customer is None:
            return OperationResult.from_error(EntityNotFoundError("customer", customer_id))
        return self._store.customers.update(customer_id, is_active=not customer.is_active)

    def delete(self, customer_id: str) -> OperationResult[Customer]:
        """Remove a customer. Rejected for the walk-in sentinel.

        Sales keep their customer_id and customer_name snapshot.
        """
        if customer_id == WALK_IN_CUSTOMER_ID:
            logger.warning("delete_rejected_walk_in")
            return OperationResult.from_error(SentinelProtectedError(customer_id, "delete"))
        return self._store.customers.remove(customer_id)

    def active_customers(self) -> list[Customer]:
        return [c for c in self._store.customers.list_all() if c.is_active]

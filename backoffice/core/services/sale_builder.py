"""
Sale transaction builder.

A SaleDraft stages line items client-side (Empty -> Staging), merging
repeated products into one line and re-checking stock against what the
draft has already claimed. SaleTransactionBuilder commits a draft into a
Completed Sale, triggers customer accrual once, and voids sales.

Committing a sale does not change product or inventory quantities, and
voiding does not reverse stock or customer statistics.
"""

from enum import Enum

from backoffice.config import get_logger, get_settings
from backoffice.core.entities.customer import WALK_IN_CUSTOMER_ID, Customer
from backoffice.core.entities.result import OperationResult
from backoffice.core.entities.sale import (
    Sale,
    SaleItem,
    SaleStatus,
    SaleTotals,
    compute_sale_totals,
)
from backoffice.core.exceptions import (
    BackOfficeError,
    ConfigurationError,
    EntityNotFoundError,
    InvalidTransitionError,
)
from backoffice.core.interfaces.collaborators import IIdGenerator
from backoffice.core.interfaces.ledger_store import ILedgerStore
from backoffice.core.services.customer_accrual import CustomerAccrualService
from backoffice.core.services.stock_ledger import check_availability
from backoffice.core.services.validation import (
    raise_for_errors,
    validate_draft_line,
    validate_sale_submission,
)

logger = get_logger(__name__)


class DraftState(str, Enum):
    """States of an in-progress sale."""

    EMPTY = "empty"
    STAGING = "staging"
    COMMITTED = "committed"


class SaleDraft:
    """One uncommitted sale being assembled.

    Discarding a draft needs no engine support: drop the object.
    """

    def __init__(
        self,
        store: ILedgerStore,
        customer_id: str = WALK_IN_CUSTOMER_ID,
        payment_method: str = "",
        tax_rate: float | None = None,
        discount_percent: float | None = None,
    ):
        ledger_settings = get_settings().ledger
        self._store = store
        self._lines: list[SaleItem] = []
        self._committed = False
        self.customer_id = customer_id
        self.payment_method = payment_method
        self.tax_rate = ledger_settings.default_tax_rate if tax_rate is None else tax_rate
        self.discount_percent = (
            ledger_settings.default_discount_percent
            if discount_percent is None
            else discount_percent
        )

    @property
    def state(self) -> DraftState:
        if self._committed:
            return DraftState.COMMITTED
        return DraftState.STAGING if self._lines else DraftState.EMPTY

    @property
    def lines(self) -> list[SaleItem]:
        return [line.model_copy() for line in self._lines]

    def staged_quantity(self, product_id: str) -> float:
        for line in self._lines:
            if line.product_id == product_id:
                return line.quantity
        return 0.0

    def available_stock(self, product_id: str) -> float:
        """Product stock not yet claimed by this draft (0 if unknown)."""
        product = self._store.products.get(product_id)
        if product is None:
            return 0.0
        return product.quantity - self.staged_quantity(product_id)

    def add_line(self, product_id: str, quantity: float) -> OperationResult[SaleItem]:
        """Stage `quantity` of a product, merging with an existing line."""
        try:
            self._ensure_open()
            raise_for_errors(validate_draft_line(product_id, quantity))
        except BackOfficeError as e:
            return OperationResult.from_error(e)

        product = self._store.products.get(product_id)
        if product is None:
            logger.info("draft_product_not_found", product_id=product_id)
            return OperationResult.from_error(EntityNotFoundError("product", product_id))
        if not product.is_active:
            logger.info("draft_product_inactive", product_id=product_id)
            return OperationResult.rejected({"product_id": "Product is not available for sale"})

        index = self._line_index(product_id)
        staged = self._lines[index].quantity if index is not None else 0.0
        availability = check_availability(product, quantity, staged_qty=staged)
        if not availability.ok:
            return availability  # type: ignore[return-value]

        if index is None:
            line = SaleItem(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                unit_price=product.selling_price,
            )
            self._lines.append(line)
        else:
            existing = self._lines[index]
            line = SaleItem(
                product_id=existing.product_id,
                product_name=existing.product_name,
                quantity=existing.quantity + quantity,
                unit_price=existing.unit_price,
            )
            self._lines[index] = line

        logger.debug(
            "draft_line_staged",
            product_id=product_id,
            quantity=line.quantity,
            merged=index is not None,
        )
        return OperationResult.applied(line.model_copy())

    def remove_line(self, index: int) -> OperationResult[SaleItem]:
        """Drop the line at `index`; the draft is Empty again after the last one."""
        try:
            self._ensure_open()
        except BackOfficeError as e:
            return OperationResult.from_error(e)
        if not 0 <= index < len(self._lines):
            return OperationResult.from_error(EntityNotFoundError("sale_line", str(index)))
        return OperationResult.applied(self._lines.pop(index))

    def clear(self) -> None:
        if not self._committed:
            self._lines.clear()

    def totals(self) -> SaleTotals:
        """Live preview of the totals for the staged lines."""
        return compute_sale_totals(self._lines, self.tax_rate, self.discount_percent)

    def mark_committed(self) -> None:
        self._committed = True

    def _line_index(self, product_id: str) -> int | None:
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                return i
        return None

    def _ensure_open(self) -> None:
        if self._committed:
            raise InvalidTransitionError(
                "draft", DraftState.COMMITTED.value, DraftState.STAGING.value
            )


class SaleTransactionBuilder:
    """Creates drafts, commits them into sales, and voids sales.

    The id generator is only needed for commit; a builder used to void
    sales can be created without one.
    """

    def __init__(
        self,
        store: ILedgerStore,
        id_generator: IIdGenerator | None = None,
        accrual: CustomerAccrualService | None = None,
    ):
        self._store = store
        self._ids = id_generator
        self._accrual = accrual or CustomerAccrualService(store)

    def new_draft(self, **kwargs) -> SaleDraft:
        return SaleDraft(self._store, **kwargs)

    def commit(self, draft: SaleDraft) -> OperationResult[Sale]:
        """Turn a staged draft into a Completed sale.

        Any failure leaves the draft as it was and writes nothing.
        """
        if self._ids is None:
            raise ConfigurationError("An id generator is required to commit sales")
        try:
            if draft.state == DraftState.COMMITTED:
                raise InvalidTransitionError(
                    "draft", DraftState.COMMITTED.value, SaleStatus.COMPLETED.value
                )
            errors = validate_sale_submission(len(draft.lines), draft.payment_method)
            customer = self._resolve_active_customer(draft.customer_id)
            if customer is None:
                errors["customer_id"] = "Select an active customer"
            raise_for_errors(errors)
        except BackOfficeError as e:
            logger.info("sale_commit_rejected", code=e.code, errors=getattr(e, "errors", {}))
            return OperationResult.from_error(e)

        now = self._store.clock.now()
        sale = Sale(
            id=self._ids.new_id(get_settings().ledger.sale_id_prefix),
            customer_id=customer.id,  # type: ignore[union-attr]
            customer_name=customer.name,  # type: ignore[union-attr]
            items=draft.lines,
            tax_rate=draft.tax_rate,
            discount_percent=draft.discount_percent,
            payment_method=draft.payment_method,
            status=SaleStatus.COMPLETED,
            created_at=now,
            updated_at=now,
        )
        result = self._store.sales.add(sale)
        if not result.ok:
            return result
        draft.mark_committed()

        if sale.customer_id != WALK_IN_CUSTOMER_ID:
            self._accrual.accrue_purchase(sale.customer_id, sale.total_amount)

        logger.info(
            "sale_committed",
            sale_id=sale.id,
            customer_id=sale.customer_id,
            items=len(sale.items),
            total=sale.total_amount,
        )
        return result

    def void(self, sale_id: str) -> OperationResult[Sale]:
        """Mark a Completed sale as Voided. Nothing else is reversed."""
        sale = self._store.sales.get(sale_id)
        if sale is None:
            return OperationResult.from_error(EntityNotFoundError("sale", sale_id))
        if sale.status != SaleStatus.COMPLETED:
            error = InvalidTransitionError(sale_id, sale.status.value, SaleStatus.VOIDED.value)
            logger.info("sale_void_rejected", sale_id=sale_id, status=sale.status.value)
            return OperationResult.from_error(error)

        result = self._store.sales.update(sale_id, status=SaleStatus.VOIDED)
        if result.ok:
            logger.info("sale_voided", sale_id=sale_id)
        return result

    def _resolve_active_customer(self, customer_id: str) -> Customer | None:
        customer = self._store.customers.get(customer_id)
        if customer is None or not customer.is_active:
            return None
        return customer

"""
Stock ledger.

Low-stock detection, sale-time availability checks, and the explicit
quantity mutation primitives for inventory items and products. Sales do
not call the mutation primitives; quantities change only when a caller
asks for it.
"""

from backoffice.config import get_logger
from backoffice.core.entities.base import Entity
from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.product import Product
from backoffice.core.entities.result import OperationResult
from backoffice.core.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from backoffice.core.interfaces.entity_store import IEntityStore
from backoffice.core.interfaces.ledger_store import ILedgerStore

logger = get_logger(__name__)


def is_low_stock(item: InventoryItem) -> bool:
    """At or below the reorder level (equality counts as low)."""
    return item.quantity <= item.reorder_level


def check_availability(
    product: Product, requested_qty: float, staged_qty: float = 0.0
) -> OperationResult[None]:
    """Check that requested_qty fits in what is left after staged_qty.

    The failure carries the remaining quantity, not the raw stock level.
    """
    available = product.quantity - staged_qty
    if available < requested_qty:
        error = InsufficientStockError(product.id, requested_qty, available)
        logger.info(
            "stock_unavailable",
            product_id=product.id,
            requested=requested_qty,
            available=available,
        )
        return OperationResult.from_error(error)
    return OperationResult.applied()


class StockLedger:
    """Quantity mutations over the inventory and product collections."""

    def __init__(self, store: ILedgerStore):
        self._store = store

    def decrease_inventory(self, item_id: str, qty: float) -> OperationResult[InventoryItem]:
        return self._decrease(self._store.inventory, "inventory_item", item_id, qty)

    def increase_inventory(self, item_id: str, qty: float) -> OperationResult[InventoryItem]:
        return self._increase(self._store.inventory, "inventory_item", item_id, qty)

    def decrease_product(self, product_id: str, qty: float) -> OperationResult[Product]:
        return self._decrease(self._store.products, "product", product_id, qty)

    def increase_product(self, product_id: str, qty: float) -> OperationResult[Product]:
        return self._increase(self._store.products, "product", product_id, qty)

    def low_stock_items(self) -> list[InventoryItem]:
        return [item for item in self._store.inventory.list_all() if is_low_stock(item)]

    def _decrease(
        self, store: IEntityStore, entity: str, entity_id: str, qty: float
    ) -> OperationResult:
        """Subtract qty, clamping at zero."""
        if qty < 0:
            return OperationResult.from_error(
                ValidationError({"quantity": "Quantity cannot be negative"})
            )
        current = store.get(entity_id)
        if current is None:
            return OperationResult.from_error(EntityNotFoundError(entity, entity_id))
        return self._apply(store, current, max(0.0, current.quantity - qty), "decrease")

    def _increase(
        self, store: IEntityStore, entity: str, entity_id: str, qty: float
    ) -> OperationResult:
        if qty < 0:
            return OperationResult.from_error(
                ValidationError({"quantity": "Quantity cannot be negative"})
            )
        current = store.get(entity_id)
        if current is None:
            return OperationResult.from_error(EntityNotFoundError(entity, entity_id))
        return self._apply(store, current, current.quantity + qty, "increase")

    @staticmethod
    def _apply(
        store: IEntityStore, current: Entity, new_qty: float, direction: str
    ) -> OperationResult:
        result = store.update(current.id, quantity=new_qty)
        if result.ok:
            logger.info(
                "stock_adjusted",
                entity_id=current.id,
                direction=direction,
                before=current.quantity,  # type: ignore[attr-defined]
                after=new_qty,
            )
        return result

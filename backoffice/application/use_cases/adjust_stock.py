"""Adjust Stock Use Case - explicit IN/OUT quantity change."""

from backoffice.application.dto.requests import AdjustStockRequest
from backoffice.config import get_logger
from backoffice.core.entities.result import OperationResult
from backoffice.core.interfaces import ILedgerStore
from backoffice.core.services.stock_ledger import StockLedger

logger = get_logger(__name__)


class AdjustStockUseCase:
    """Increase or decrease an inventory item or product quantity.

    Decreases clamp at zero rather than failing.
    """

    def __init__(self, store: ILedgerStore | None = None):
        self._store = store

    def _get_ledger(self) -> StockLedger:
        if self._store is None:
            from backoffice.application.services import get_ledger_store

            self._store = get_ledger_store()
        return StockLedger(self._store)

    def execute(self, request: AdjustStockRequest) -> OperationResult:
        """Execute adjust stock use case."""
        logger.info(
            "adjust_stock_started",
            target=request.target,
            entity_id=request.entity_id,
            direction=request.direction,
            quantity=request.quantity,
        )
        ledger = self._get_ledger()
        operations = {
            ("inventory", "increase"): ledger.increase_inventory,
            ("inventory", "decrease"): ledger.decrease_inventory,
            ("product", "increase"): ledger.increase_product,
            ("product", "decrease"): ledger.decrease_product,
        }
        return operations[(request.target, request.direction)](
            request.entity_id, request.quantity
        )

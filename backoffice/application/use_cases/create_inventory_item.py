"""Create Inventory Item Use Case."""

from backoffice.application.dto.requests import CreateInventoryItemRequest
from backoffice.config import get_logger
from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.result import OperationResult
from backoffice.core.interfaces import IIdGenerator, ILedgerStore
from backoffice.core.services.validation import validate_inventory_item

logger = get_logger(__name__)

INVENTORY_ID_PREFIX = "inv"


class CreateInventoryItemUseCase:
    """Validate and add a raw material to inventory."""

    def __init__(
        self,
        store: ILedgerStore | None = None,
        id_generator: IIdGenerator | None = None,
    ):
        self._store = store
        self._id_generator = id_generator

    def _get_store(self) -> ILedgerStore:
        if self._store is None:
            from backoffice.application.services import get_ledger_store

            self._store = get_ledger_store()
        return self._store

    def _get_id_generator(self) -> IIdGenerator:
        if self._id_generator is None:
            from backoffice.application.services import get_id_generator

            self._id_generator = get_id_generator()
        return self._id_generator

    def execute(self, request: CreateInventoryItemRequest) -> OperationResult[InventoryItem]:
        """Execute create inventory item use case."""
        logger.info("create_inventory_item_started", sku=request.sku)

        item = InventoryItem(
            id=self._get_id_generator().new_id(INVENTORY_ID_PREFIX),
            **request.model_dump(),
        )
        errors = validate_inventory_item(item)
        if errors:
            logger.info("create_inventory_item_rejected", fields=sorted(errors))
            return OperationResult.rejected(errors)

        result = self._get_store().inventory.add(item)
        if result.ok:
            logger.info("create_inventory_item_complete", item_id=item.id)
        return result

"""Aggregate store holding every entity collection of the ledger."""

from backoffice.config import get_logger, get_settings
from backoffice.core.entities.customer import WALK_IN_CUSTOMER_ID, Customer, CustomerType
from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.product import Product
from backoffice.core.entities.sale import Sale
from backoffice.core.interfaces.collaborators import IClock
from backoffice.core.interfaces.ledger_store import ILedgerStore, LedgerSnapshot
from backoffice.core.services.validation import validate_inventory_item, validate_product
from backoffice.infrastructure.clock import SystemClock
from backoffice.infrastructure.storage.memory.customer_store import InMemoryCustomerStore
from backoffice.infrastructure.storage.memory.entity_store import InMemoryEntityStore
from backoffice.infrastructure.storage.memory.sale_store import InMemorySaleStore

logger = get_logger(__name__)


class LedgerStore(ILedgerStore):
    """Explicit store object passed to every engine service.

    Construct one per session (or per test); there is no module-level
    shared state.
    """

    def __init__(self, clock: IClock | None = None):
        self.clock = clock or SystemClock()
        self.inventory: InMemoryEntityStore[InventoryItem] = InMemoryEntityStore(
            "inventory_item", self.clock, validator=validate_inventory_item
        )
        self.products: InMemoryEntityStore[Product] = InMemoryEntityStore(
            "product", self.clock, validator=validate_product
        )
        self.sales: InMemoryEntityStore[Sale] = InMemorySaleStore(self.clock)
        self.customers = InMemoryCustomerStore(self.clock)
        self.ensure_walk_in_customer()

    def ensure_walk_in_customer(self) -> Customer:
        """Create the walk-in sentinel if it is missing."""
        existing = self.customers.get(WALK_IN_CUSTOMER_ID)
        if existing is not None:
            return existing

        walk_in = Customer(
            id=WALK_IN_CUSTOMER_ID,
            name=get_settings().ledger.walk_in_customer_name,
            customer_type=CustomerType.WALK_IN,
        )
        result = self.customers.add(walk_in)
        logger.info("walk_in_customer_created")
        return result.value  # type: ignore[return-value]

    def load(
        self,
        inventory: list[InventoryItem] | None = None,
        products: list[Product] | None = None,
        sales: list[Sale] | None = None,
        customers: list[Customer] | None = None,
    ) -> None:
        """Bulk-replace collections; the walk-in sentinel is restored if absent."""
        if inventory is not None:
            self.inventory.reset(inventory)
        if products is not None:
            self.products.reset(products)
        if sales is not None:
            self.sales.reset(sales)
        if customers is not None:
            self.customers.reset(customers)
        self.ensure_walk_in_customer()

    def snapshot(self) -> LedgerSnapshot:
        return LedgerSnapshot(
            inventory=tuple(self.inventory.list_all()),
            products=tuple(self.products.list_all()),
            sales=tuple(self.sales.list_all()),
            customers=tuple(self.customers.list_all()),
        )

"""Abstract interface for the aggregate ledger store."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from backoffice.core.entities.customer import Customer
from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.product import Product
from backoffice.core.entities.sale import Sale
from backoffice.core.interfaces.collaborators import IClock
from backoffice.core.interfaces.entity_store import IEntityStore


@dataclass(frozen=True)
class LedgerSnapshot:
    """Point-in-time copy of all collections, for read-only projections."""

    inventory: tuple[InventoryItem, ...]
    products: tuple[Product, ...]
    sales: tuple[Sale, ...]
    customers: tuple[Customer, ...]


class ILedgerStore(ABC):
    """The four entity collections plus the clock that stamps them."""

    clock: IClock
    inventory: IEntityStore[InventoryItem]
    products: IEntityStore[Product]
    sales: IEntityStore[Sale]
    customers: IEntityStore[Customer]

    @abstractmethod
    def snapshot(self) -> LedgerSnapshot:
        """Copy every collection at once."""
        pass

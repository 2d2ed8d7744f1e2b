"""In-memory storage implementations."""

from backoffice.infrastructure.storage.memory.customer_store import InMemoryCustomerStore
from backoffice.infrastructure.storage.memory.entity_store import InMemoryEntityStore
from backoffice.infrastructure.storage.memory.ledger_store import LedgerStore
from backoffice.infrastructure.storage.memory.sale_store import InMemorySaleStore
from backoffice.infrastructure.storage.memory.seed import seed_demo_data

__all__ = [
    "InMemoryEntityStore",
    "InMemoryCustomerStore",
    "InMemorySaleStore",
    "LedgerStore",
    "seed_demo_data",
]

"""Core interfaces (ports) for dependency injection."""

from backoffice.core.interfaces.collaborators import IClock, IIdGenerator
from backoffice.core.interfaces.entity_store import IEntityStore
from backoffice.core.interfaces.ledger_store import ILedgerStore, LedgerSnapshot

__all__ = [
    "IEntityStore",
    "ILedgerStore",
    "LedgerSnapshot",
    "IClock",
    "IIdGenerator",
]

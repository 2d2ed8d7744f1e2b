"""
Service factory functions for dependency injection.

Wires infrastructure implementations (in-memory ledger store, clock,
id generator) to the core services. Use cases take explicit
dependencies and fall back to these factories.
"""

from backoffice.config import get_logger, get_settings
from backoffice.core.interfaces import IClock, IIdGenerator, ILedgerStore
from backoffice.infrastructure.clock import SystemClock
from backoffice.infrastructure.ids import UuidIdGenerator
from backoffice.infrastructure.storage.memory import LedgerStore, seed_demo_data

logger = get_logger(__name__)

# Session-wide instances
_ledger_store: LedgerStore | None = None
_id_generator: IIdGenerator | None = None


def get_ledger_store(clock: IClock | None = None) -> ILedgerStore:
    """Get or create the session ledger store.

    Seeds the demo data set when LEDGER_SEED_DEMO_DATA is enabled.
    """
    global _ledger_store
    if _ledger_store is None:
        _ledger_store = LedgerStore(clock or SystemClock())
        if get_settings().ledger.seed_demo_data:
            seed_demo_data(_ledger_store)
            logger.info("ledger_seeded")
    return _ledger_store


def get_id_generator() -> IIdGenerator:
    global _id_generator
    if _id_generator is None:
        _id_generator = UuidIdGenerator()
    return _id_generator


def reset_services() -> None:
    """Drop session instances (for testing)."""
    global _ledger_store, _id_generator
    _ledger_store = None
    _id_generator = None

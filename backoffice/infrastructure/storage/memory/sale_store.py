"""Sale store enforcing recorded totals and the void transition."""

from backoffice.core.entities.sale import SALE_IMMUTABLE_FIELDS, Sale, SaleStatus
from backoffice.core.exceptions import InvalidTransitionError
from backoffice.core.interfaces.collaborators import IClock
from backoffice.infrastructure.storage.memory.entity_store import InMemoryEntityStore

# The only status change a recorded sale may undergo
ALLOWED_TRANSITIONS = frozenset({(SaleStatus.COMPLETED, SaleStatus.VOIDED)})


class InMemorySaleStore(InMemoryEntityStore[Sale]):
    """Sale store where items, rates and totals are fixed once recorded."""

    def __init__(self, clock: IClock):
        super().__init__("sale", clock, immutable_fields=SALE_IMMUTABLE_FIELDS)

    def _guard_update(self, current: Sale, updated: Sale) -> None:
        if updated.status == current.status:
            return
        if (current.status, updated.status) not in ALLOWED_TRANSITIONS:
            raise InvalidTransitionError(
                current.id, current.status.value, updated.status.value
            )

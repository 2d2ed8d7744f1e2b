"""Customer store enforcing the walk-in sentinel."""

from backoffice.core.entities.customer import WALK_IN_CUSTOMER_ID, Customer
from backoffice.core.exceptions import SentinelProtectedError
from backoffice.core.interfaces.collaborators import IClock
from backoffice.core.services.validation import validate_customer
from backoffice.infrastructure.storage.memory.entity_store import InMemoryEntityStore


def _validate_customer_edit(customer: Customer) -> dict[str, str]:
    errors = validate_customer(customer)
    if customer.id == WALK_IN_CUSTOMER_ID:
        # the sentinel is the one record allowed to carry the walk-in type
        errors.pop("customer_type", None)
    return errors


class InMemoryCustomerStore(InMemoryEntityStore[Customer]):
    """Customer store that refuses to delete or deactivate the walk-in record."""

    def __init__(self, clock: IClock):
        super().__init__("customer", clock, validator=_validate_customer_edit)

    def reset(self, entities: list[Customer]) -> None:
        """Bulk load; a loaded walk-in record is always stored active."""
        super().reset(
            [
                e.model_copy(update={"is_active": True}) if e.id == WALK_IN_CUSTOMER_ID else e
                for e in entities
            ]
        )

    def _guard_update(self, current: Customer, updated: Customer) -> None:
        if current.id == WALK_IN_CUSTOMER_ID and not updated.is_active:
            raise SentinelProtectedError(current.id, "deactivate")

    def _guard_remove(self, current: Customer) -> None:
        if current.id == WALK_IN_CUSTOMER_ID:
            raise SentinelProtectedError(current.id, "delete")

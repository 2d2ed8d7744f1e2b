"""Create Customer Use Case."""

from backoffice.application.dto.requests import CreateCustomerRequest
from backoffice.config import get_logger
from backoffice.core.entities.customer import Customer
from backoffice.core.entities.result import OperationResult
from backoffice.core.interfaces import IIdGenerator, ILedgerStore
from backoffice.core.services.validation import validate_customer

logger = get_logger(__name__)

CUSTOMER_ID_PREFIX = "customer"


class CreateCustomerUseCase:
    """Validate and add a customer with zeroed purchase statistics."""

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

    def execute(self, request: CreateCustomerRequest) -> OperationResult[Customer]:
        """Execute create customer use case."""
        logger.info("create_customer_started", customer_type=request.customer_type.value)

        customer = Customer(
            id=self._get_id_generator().new_id(CUSTOMER_ID_PREFIX),
            total_purchases=0,
            total_spent=0.0,
            last_purchase_date=None,
            **request.model_dump(),
        )
        errors = validate_customer(customer)
        if errors:
            logger.info("create_customer_rejected", fields=sorted(errors))
            return OperationResult.rejected(errors)

        result = self._get_store().customers.add(customer)
        if result.ok:
            logger.info("create_customer_complete", customer_id=customer.id)
        return result

"""Record Sale Use Case - stage every line, then commit once."""

from backoffice.application.dto.requests import RecordSaleRequest
from backoffice.config import get_logger
from backoffice.core.entities.result import OperationResult
from backoffice.core.entities.sale import Sale
from backoffice.core.interfaces import IIdGenerator, ILedgerStore
from backoffice.core.services.sale_builder import SaleTransactionBuilder

logger = get_logger(__name__)


class RecordSaleUseCase:
    """Build a draft from a complete request and commit it.

    All or nothing: if any line is rejected the draft is discarded and
    nothing is written. The failing line's index is added to the
    result's field errors as items.<index>.
    """

    def __init__(
        self,
        store: ILedgerStore | None = None,
        id_generator: IIdGenerator | None = None,
    ):
        self._store = store
        self._id_generator = id_generator

    def _get_builder(self) -> SaleTransactionBuilder:
        from backoffice.application import services

        store = self._store or services.get_ledger_store()
        ids = self._id_generator or services.get_id_generator()
        return SaleTransactionBuilder(store, ids)

    def execute(self, request: RecordSaleRequest) -> OperationResult[Sale]:
        """Execute record sale use case."""
        logger.info(
            "record_sale_started",
            customer_id=request.customer_id,
            lines=len(request.items),
        )
        builder = self._get_builder()
        draft = builder.new_draft(
            customer_id=request.customer_id,
            payment_method=request.payment_method,
            tax_rate=request.tax_rate,
            discount_percent=request.discount_percent,
        )

        for index, line in enumerate(request.items):
            staged = draft.add_line(line.product_id, line.quantity)
            if not staged.ok:
                logger.info(
                    "record_sale_line_rejected",
                    index=index,
                    product_id=line.product_id,
                    code=staged.code,
                )
                staged.errors[f"items.{index}"] = staged.message or "Line rejected"
                return staged  # type: ignore[return-value]

        result = builder.commit(draft)
        if result.ok:
            logger.info(
                "record_sale_complete",
                sale_id=result.value.id,  # type: ignore[union-attr]
                total=result.value.total_amount,  # type: ignore[union-attr]
            )
        return result


class VoidSaleUseCase:
    """Void a Completed sale."""

    def __init__(self, store: ILedgerStore | None = None):
        self._store = store

    def _get_store(self) -> ILedgerStore:
        if self._store is None:
            from backoffice.application.services import get_ledger_store

            self._store = get_ledger_store()
        return self._store

    def execute(self, sale_id: str) -> OperationResult[Sale]:
        logger.info("void_sale_started", sale_id=sale_id)
        return SaleTransactionBuilder(self._get_store()).void(sale_id)

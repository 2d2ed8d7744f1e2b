"""Create Product Use Case - stores the product with its BOM cost."""

from dataclasses import dataclass, field

from backoffice.application.dto.requests import CreateProductRequest
from backoffice.config import get_logger
from backoffice.core.entities.product import Product, ProductMaterial
from backoffice.core.entities.result import OperationResult
from backoffice.core.exceptions import EntityNotFoundError
from backoffice.core.interfaces import IIdGenerator, ILedgerStore
from backoffice.core.services.bom_costing import CostBreakdown, breakdown_production_cost
from backoffice.core.services.validation import validate_product

logger = get_logger(__name__)

PRODUCT_ID_PREFIX = "product"


@dataclass
class CreateProductResult:
    """Stored product plus the cost breakdown its production_cost came from."""

    result: OperationResult[Product]
    breakdown: CostBreakdown = field(default_factory=CostBreakdown)

    @property
    def product(self) -> Product | None:
        return self.result.value


class CreateProductUseCase:
    """Validate a product, roll up its production cost, and add it.

    production_cost is computed once here from current inventory costs.
    Later cost changes only reach the product through
    RecalculateProductionCostUseCase.
    """

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

    def execute(self, request: CreateProductRequest) -> CreateProductResult:
        """Execute create product use case."""
        logger.info(
            "create_product_started",
            sku=request.sku,
            materials=len(request.materials),
        )
        store = self._get_store()

        materials = [
            ProductMaterial(inventory_item_id=m.inventory_item_id, quantity=m.quantity)
            for m in request.materials
        ]
        breakdown = breakdown_production_cost(materials, store.inventory.list_all())
        product = Product(
            id=self._get_id_generator().new_id(PRODUCT_ID_PREFIX),
            name=request.name,
            sku=request.sku,
            description=request.description,
            selling_price=request.selling_price,
            production_cost=breakdown.total,
            quantity=request.quantity,
            is_active=request.is_active,
            materials=materials,
        )

        errors = validate_product(product)
        if errors:
            logger.info("create_product_rejected", fields=sorted(errors))
            return CreateProductResult(result=OperationResult.rejected(errors), breakdown=breakdown)

        result = store.products.add(product)
        if result.ok:
            logger.info(
                "create_product_complete",
                product_id=product.id,
                production_cost=breakdown.total,
                complete=breakdown.complete,
            )
        return CreateProductResult(result=result, breakdown=breakdown)


class RecalculateProductionCostUseCase:
    """Refresh a stored product's production_cost from current inventory."""

    def __init__(self, store: ILedgerStore | None = None):
        self._store = store

    def _get_store(self) -> ILedgerStore:
        if self._store is None:
            from backoffice.application.services import get_ledger_store

            self._store = get_ledger_store()
        return self._store

    def execute(self, product_id: str) -> CreateProductResult:
        store = self._get_store()
        product = store.products.get(product_id)
        if product is None:
            return CreateProductResult(
                result=OperationResult.from_error(EntityNotFoundError("product", product_id))
            )

        breakdown = breakdown_production_cost(product.materials, store.inventory.list_all())
        result = store.products.update(product_id, production_cost=breakdown.total)
        if result.ok:
            logger.info(
                "production_cost_recalculated",
                product_id=product_id,
                before=product.production_cost,
                after=breakdown.total,
            )
        return CreateProductResult(result=result, breakdown=breakdown)

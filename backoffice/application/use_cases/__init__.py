"""Application use cases."""

from backoffice.application.use_cases.adjust_stock import AdjustStockUseCase
from backoffice.application.use_cases.create_customer import CreateCustomerUseCase
from backoffice.application.use_cases.create_inventory_item import CreateInventoryItemUseCase
from backoffice.application.use_cases.create_product import (
    CreateProductResult,
    CreateProductUseCase,
    RecalculateProductionCostUseCase,
)
from backoffice.application.use_cases.record_sale import RecordSaleUseCase, VoidSaleUseCase

__all__ = [
    "AdjustStockUseCase",
    "CreateCustomerUseCase",
    "CreateInventoryItemUseCase",
    "CreateProductResult",
    "CreateProductUseCase",
    "RecalculateProductionCostUseCase",
    "RecordSaleUseCase",
    "VoidSaleUseCase",
]

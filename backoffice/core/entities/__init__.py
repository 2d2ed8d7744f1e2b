"""Core domain entities."""

from backoffice.core.entities.base import Entity, parse_timestamp
from backoffice.core.entities.customer import (
    WALK_IN_CUSTOMER_ID,
    Customer,
    CustomerType,
)
from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.product import Product, ProductMaterial
from backoffice.core.entities.result import OperationResult, Outcome
from backoffice.core.entities.sale import (
    SALE_IMMUTABLE_FIELDS,
    Sale,
    SaleItem,
    SaleStatus,
    SaleTotals,
    compute_sale_totals,
)

__all__ = [
    "Entity",
    "parse_timestamp",
    # Inventory entities
    "InventoryItem",
    # Product entities
    "Product",
    "ProductMaterial",
    # Sale entities
    "Sale",
    "SaleItem",
    "SaleStatus",
    "SaleTotals",
    "compute_sale_totals",
    "SALE_IMMUTABLE_FIELDS",
    # Customer entities
    "Customer",
    "CustomerType",
    "WALK_IN_CUSTOMER_ID",
    # Results
    "OperationResult",
    "Outcome",
]

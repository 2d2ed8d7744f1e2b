"""Data Transfer Objects for use cases."""

from backoffice.application.dto.requests import (
    AdjustStockRequest,
    CreateCustomerRequest,
    CreateInventoryItemRequest,
    CreateProductRequest,
    MaterialLineRequest,
    RecordSaleRequest,
    SaleLineRequest,
)

__all__ = [
    "AdjustStockRequest",
    "CreateCustomerRequest",
    "CreateInventoryItemRequest",
    "CreateProductRequest",
    "MaterialLineRequest",
    "RecordSaleRequest",
    "SaleLineRequest",
]

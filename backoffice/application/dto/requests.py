"""Request DTOs for use cases.

Pydantic v2 models describing what a presentation layer submits. Types
are parsed here; business rules are checked by the engine so that all
field errors come back together.
"""

from typing import Literal

from pydantic import BaseModel, Field

from backoffice.core.entities.customer import CustomerType


class MaterialLineRequest(BaseModel):
    """One bill-of-materials line."""

    inventory_item_id: str = Field(default="", description="Inventory item id")
    quantity: float = Field(default=0.0, description="Units consumed per product")


class CreateInventoryItemRequest(BaseModel):
    """Request to add a raw material to inventory."""

    name: str = ""
    sku: str = ""
    description: str = ""
    quantity: float = 0.0
    unit: str = Field(default="", examples=["kg", "pcs"])
    cost_per_unit: float = 0.0
    category: str | None = Field(default=None, examples=["Ingredients", "Packaging"])
    reorder_level: float = 0.0


class CreateProductRequest(BaseModel):
    """Request to add a product; production cost is computed, not submitted."""

    name: str = ""
    sku: str = ""
    description: str = ""
    selling_price: float = 0.0
    quantity: float = 0.0
    is_active: bool = True
    materials: list[MaterialLineRequest] = Field(default_factory=list)


class CreateCustomerRequest(BaseModel):
    """Request to add a customer."""

    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    customer_type: CustomerType = CustomerType.REGULAR
    notes: str = ""
    is_active: bool = True


class SaleLineRequest(BaseModel):
    product_id: str = ""
    quantity: float = 0.0


class RecordSaleRequest(BaseModel):
    """A complete sale submitted in one go.

    Lines are staged in order, so repeated product ids merge exactly as
    they would when added one at a time.
    """

    customer_id: str = Field(default="walk-in", description="Customer id or 'walk-in'")
    items: list[SaleLineRequest] = Field(default_factory=list)
    payment_method: str = Field(default="", examples=["Cash", "Credit Card"])
    tax_rate: float | None = Field(default=None, description="Percent, e.g. 7 for 7%")
    discount_percent: float | None = Field(default=None, description="Percent")


class AdjustStockRequest(BaseModel):
    """Explicit quantity change for an inventory item or product."""

    target: Literal["inventory", "product"]
    entity_id: str
    quantity: float
    direction: Literal["increase", "decrease"]

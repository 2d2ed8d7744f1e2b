"""Finished product entities with their bill of materials."""

from pydantic import BaseModel, Field

from backoffice.core.entities.base import Entity


class ProductMaterial(BaseModel):
    """One bill-of-materials line: a by-id reference to an inventory item."""

    inventory_item_id: str
    quantity: float


class Product(Entity):
    """A finished good assembled from inventory items."""

    name: str
    sku: str = ""
    description: str = ""
    selling_price: float = 0.0
    production_cost: float = 0.0  # stored at creation, not auto-refreshed
    quantity: float = 0.0
    is_active: bool = True
    materials: list[ProductMaterial] = Field(default_factory=list)

    @property
    def profit_per_item(self) -> float:
        return self.selling_price - self.production_cost

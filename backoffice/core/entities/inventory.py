"""Inventory (raw material) domain entities."""

from backoffice.core.entities.base import Entity


class InventoryItem(Entity):
    """A raw material tracked in stock."""

    name: str
    sku: str = ""
    description: str = ""
    quantity: float = 0.0
    unit: str = ""
    cost_per_unit: float = 0.0
    category: str | None = None
    reorder_level: float = 0.0

    @property
    def total_value(self) -> float:
        """Stock value = quantity * cost_per_unit."""
        return self.quantity * self.cost_per_unit

    @property
    def is_low_stock(self) -> bool:
        """At or below the reorder level."""
        return self.quantity <= self.reorder_level

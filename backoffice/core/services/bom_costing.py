"""
Bill-of-materials cost engine.

Rolls a product's production cost up from its material list and the
current inventory unit costs. Material entries are by-id references; an
entry whose inventory item no longer exists contributes zero and is
reported in the breakdown instead of failing.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from backoffice.config import get_logger
from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.product import ProductMaterial

logger = get_logger(__name__)


@dataclass
class MaterialCost:
    """Cost contribution of one resolved material line."""

    inventory_item_id: str
    name: str
    quantity: float
    cost_per_unit: float
    cost: float


@dataclass
class CostBreakdown:
    """Production cost with per-line detail and unresolved references."""

    total: float = 0.0
    lines: list[MaterialCost] = field(default_factory=list)
    missing_item_ids: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True when every material resolved to an inventory item."""
        return not self.missing_item_ids


def resolve_inventory_item(
    item_id: str, inventory: Iterable[InventoryItem]
) -> InventoryItem | None:
    """Look an inventory item up by id in a snapshot."""
    for item in inventory:
        if item.id == item_id:
            return item
    return None


def breakdown_production_cost(
    materials: Iterable[ProductMaterial], inventory: Iterable[InventoryItem]
) -> CostBreakdown:
    """Compute production cost line by line, recording skipped references."""
    by_id = {item.id: item for item in inventory}
    breakdown = CostBreakdown()

    for material in materials:
        item = by_id.get(material.inventory_item_id)
        if item is None:
            breakdown.missing_item_ids.append(material.inventory_item_id)
            continue
        cost = item.cost_per_unit * material.quantity
        breakdown.lines.append(
            MaterialCost(
                inventory_item_id=item.id,
                name=item.name,
                quantity=material.quantity,
                cost_per_unit=item.cost_per_unit,
                cost=cost,
            )
        )
        breakdown.total += cost

    if breakdown.missing_item_ids:
        logger.warning(
            "bom_missing_materials",
            missing=breakdown.missing_item_ids,
        )
    return breakdown


def compute_production_cost(
    materials: Iterable[ProductMaterial], inventory: Iterable[InventoryItem]
) -> float:
    """Sum of cost_per_unit * quantity over resolvable materials."""
    return breakdown_production_cost(materials, inventory).total


def compute_profit_margin(selling_price: float, production_cost: float) -> float:
    """Margin in percent of selling price; negative when priced below cost."""
    if selling_price <= 0:
        return 0.0
    return (selling_price - production_cost) / selling_price * 100


def compute_profit_per_item(selling_price: float, production_cost: float) -> float:
    return selling_price - production_cost

"""Tests for inventory and product entities."""

from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.product import Product, ProductMaterial


class TestInventoryItem:
    """Tests for InventoryItem entity."""

    def test_defaults(self):
        item = InventoryItem(id="inv-1", name="Flour")
        assert item.quantity == 0.0
        assert item.cost_per_unit == 0.0
        assert item.category is None
        assert item.created_at == ""

    def test_total_value(self):
        item = InventoryItem(id="inv-1", name="Flour", quantity=50, cost_per_unit=0.8)
        assert item.total_value == 40.0

    def test_low_stock_at_reorder_level(self):
        """Equality with the reorder level counts as low."""
        item = InventoryItem(id="inv-1", name="Flour", quantity=10, reorder_level=10)
        assert item.is_low_stock

    def test_not_low_above_reorder_level(self):
        item = InventoryItem(id="inv-1", name="Flour", quantity=11, reorder_level=10)
        assert not item.is_low_stock


class TestProduct:
    """Tests for Product entity."""

    def test_defaults(self):
        product = Product(id="p1", name="Cake")
        assert product.is_active is True
        assert product.materials == []
        assert product.production_cost == 0.0

    def test_profit_per_item(self):
        product = Product(id="p1", name="Cake", selling_price=25.99, production_cost=8.75)
        assert round(product.profit_per_item, 2) == 17.24

    def test_materials_parsed_from_dicts(self):
        product = Product(
            id="p1",
            name="Cake",
            materials=[{"inventory_item_id": "inv-1", "quantity": 0.5}],
        )
        assert product.materials == [ProductMaterial(inventory_item_id="inv-1", quantity=0.5)]

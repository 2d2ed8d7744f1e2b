"""Tests for the create use cases."""

import pytest

from backoffice.application.dto import (
    CreateCustomerRequest,
    CreateInventoryItemRequest,
    CreateProductRequest,
    MaterialLineRequest,
)
from backoffice.application.use_cases import (
    CreateCustomerUseCase,
    CreateInventoryItemUseCase,
    CreateProductUseCase,
    RecalculateProductionCostUseCase,
)
from backoffice.core.entities.customer import CustomerType
from backoffice.core.entities.result import Outcome


class TestCreateInventoryItemUseCase:
    def test_creates_item(self, store, id_generator):
        use_case = CreateInventoryItemUseCase(store=store, id_generator=id_generator)
        request = CreateInventoryItemRequest(
            name="Flour", sku="FL-001", quantity=50, unit="kg", cost_per_unit=0.8, reorder_level=10
        )
        result = use_case.execute(request)

        assert result.ok
        assert result.value.id == "inv-000001"
        assert result.value.category is None
        assert store.inventory.get("inv-000001").name == "Flour"

    def test_rejects_invalid_fields(self, store, id_generator):
        use_case = CreateInventoryItemUseCase(store=store, id_generator=id_generator)
        result = use_case.execute(CreateInventoryItemRequest(name="Flour", quantity=-1))

        assert result.outcome == Outcome.REJECTED
        assert set(result.errors) == {"sku", "unit", "quantity", "cost_per_unit"}
        assert len(store.inventory) == 0


class TestCreateProductUseCase:
    def _request(self, **overrides) -> CreateProductRequest:
        data = {
            "name": "Chocolate Cake",
            "sku": "CK-001",
            "selling_price": 10.0,
            "quantity": 5,
            "materials": [
                MaterialLineRequest(inventory_item_id="inv-flour", quantity=0.5),
                MaterialLineRequest(inventory_item_id="inv-sugar", quantity=0.3),
            ],
        }
        data.update(overrides)
        return CreateProductRequest(**data)

    def test_computes_production_cost(self, stocked_store, id_generator):
        use_case = CreateProductUseCase(store=stocked_store, id_generator=id_generator)
        created = use_case.execute(self._request())

        assert created.result.ok
        assert created.product.id == "product-000001"
        assert created.product.production_cost == pytest.approx(0.76)
        assert created.breakdown.complete

    def test_missing_material_reported(self, stocked_store, id_generator):
        use_case = CreateProductUseCase(store=stocked_store, id_generator=id_generator)
        request = self._request(
            materials=[
                MaterialLineRequest(inventory_item_id="inv-flour", quantity=1),
                MaterialLineRequest(inventory_item_id="inv-gone", quantity=1),
            ]
        )
        created = use_case.execute(request)

        assert created.result.ok
        assert created.product.production_cost == pytest.approx(0.8)
        assert created.breakdown.missing_item_ids == ["inv-gone"]

    def test_rejects_without_materials(self, stocked_store, id_generator):
        use_case = CreateProductUseCase(store=stocked_store, id_generator=id_generator)
        created = use_case.execute(self._request(materials=[]))

        assert created.result.outcome == Outcome.REJECTED
        assert "materials" in created.result.errors
        assert created.product is None

    def test_cost_not_refreshed_until_recalculated(self, stocked_store, id_generator):
        created = CreateProductUseCase(store=stocked_store, id_generator=id_generator).execute(
            self._request()
        )
        product_id = created.product.id
        stocked_store.inventory.update("inv-flour", cost_per_unit=2.0)
        assert stocked_store.products.get(product_id).production_cost == pytest.approx(0.76)

        refreshed = RecalculateProductionCostUseCase(store=stocked_store).execute(product_id)
        assert refreshed.result.ok
        assert refreshed.product.production_cost == pytest.approx(1.36)

    def test_recalculate_unknown_product(self, stocked_store):
        refreshed = RecalculateProductionCostUseCase(store=stocked_store).execute("ghost")
        assert refreshed.result.outcome == Outcome.NOT_FOUND


class TestCreateCustomerUseCase:
    def test_creates_with_zeroed_statistics(self, store, id_generator):
        use_case = CreateCustomerUseCase(store=store, id_generator=id_generator)
        request = CreateCustomerRequest(
            name="Jane Smith", email="jane.smith@email.com", customer_type=CustomerType.VIP
        )
        result = use_case.execute(request)

        assert result.ok
        assert result.value.id == "customer-000001"
        assert result.value.total_purchases == 0
        assert result.value.last_purchase_date is None

    def test_rejects_walk_in_type(self, store, id_generator):
        use_case = CreateCustomerUseCase(store=store, id_generator=id_generator)
        result = use_case.execute(
            CreateCustomerRequest(name="Someone", customer_type=CustomerType.WALK_IN)
        )
        assert result.errors == {
            "customer_type": "Walk-in type is reserved for the walk-in customer"
        }

    def test_rejects_bad_email(self, store, id_generator):
        use_case = CreateCustomerUseCase(store=store, id_generator=id_generator)
        result = use_case.execute(CreateCustomerRequest(name="Jane", email="not-an-email"))
        assert result.errors == {"email": "Please enter a valid email address"}

"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from backoffice.application.services import reset_services
from backoffice.config import reset_settings
from backoffice.core.entities import (
    Customer,
    CustomerType,
    InventoryItem,
    Product,
    ProductMaterial,
)
from backoffice.infrastructure.clock import FixedClock
from backoffice.infrastructure.ids import SequentialIdGenerator
from backoffice.infrastructure.storage.memory import LedgerStore, seed_demo_data


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Generator[None, None, None]:
    """Fresh settings and service singletons for every test."""
    for name in ("LEDGER_DEFAULT_TAX_RATE", "LEDGER_DEFAULT_DISCOUNT_PERCENT", "LEDGER_SEED_DEMO_DATA"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_services()
    yield
    reset_settings()
    reset_services()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def store(clock) -> LedgerStore:
    """Empty ledger (walk-in customer only)."""
    return LedgerStore(clock)


@pytest.fixture
def seeded_store(clock) -> LedgerStore:
    """Ledger loaded with the demo bakery data."""
    return seed_demo_data(LedgerStore(clock))


@pytest.fixture
def flour() -> InventoryItem:
    return InventoryItem(
        id="inv-flour",
        name="Flour",
        sku="FL-001",
        quantity=50,
        unit="kg",
        cost_per_unit=0.8,
        category="Ingredients",
        reorder_level=10,
    )


@pytest.fixture
def sugar() -> InventoryItem:
    return InventoryItem(
        id="inv-sugar",
        name="Sugar",
        sku="SG-001",
        quantity=30,
        unit="kg",
        cost_per_unit=1.2,
        category="Ingredients",
        reorder_level=5,
    )


@pytest.fixture
def cake() -> Product:
    return Product(
        id="prod-cake",
        name="Chocolate Cake",
        sku="CK-001",
        selling_price=10.0,
        production_cost=2.0,
        quantity=5,
        materials=[
            ProductMaterial(inventory_item_id="inv-flour", quantity=0.5),
            ProductMaterial(inventory_item_id="inv-sugar", quantity=0.3),
        ],
    )


@pytest.fixture
def customer() -> Customer:
    return Customer(
        id="cust-1",
        name="John Doe",
        email="john.doe@email.com",
        phone="(555) 123-4567",
        customer_type=CustomerType.REGULAR,
    )


@pytest.fixture
def stocked_store(store, flour, sugar, cake, customer) -> LedgerStore:
    """Ledger with two materials, one product and one customer."""
    store.inventory.add(flour)
    store.inventory.add(sugar)
    store.products.add(cake)
    store.customers.add(customer)
    return store

"""Demo bakery data for trying out the ledger."""

from backoffice.core.entities.customer import WALK_IN_CUSTOMER_ID, Customer, CustomerType
from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.product import Product, ProductMaterial
from backoffice.core.entities.sale import Sale, SaleItem, SaleStatus
from backoffice.infrastructure.storage.memory.ledger_store import LedgerStore


def _inventory() -> list[InventoryItem]:
    rows = [
        ("inv-001", "Flour", "FL-001", "All-purpose flour", 50, "kg", 0.80, "Ingredients", 10, "10:30"),
        ("inv-002", "Sugar", "SG-001", "White granulated sugar", 30, "kg", 1.20, "Ingredients", 5, "10:35"),
        ("inv-003", "Butter", "BT-001", "Unsalted butter", 20, "kg", 4.50, "Ingredients", 8, "10:40"),
        ("inv-004", "Eggs", "EG-001", "Large eggs", 100, "pcs", 0.20, "Ingredients", 24, "10:45"),
        ("inv-005", "Packaging Box", "PK-001", "Small cake box", 200, "pcs", 0.30, "Packaging", 50, "11:00"),
    ]
    return [
        InventoryItem(
            id=item_id,
            name=name,
            sku=sku,
            description=description,
            quantity=quantity,
            unit=unit,
            cost_per_unit=cost,
            category=category,
            reorder_level=reorder,
            created_at=f"2023-04-15T{clock}:00Z",
            updated_at=f"2023-04-15T{clock}:00Z",
        )
        for item_id, name, sku, description, quantity, unit, cost, category, reorder, clock in rows
    ]


def _products() -> list[Product]:
    def bom(*pairs: tuple[str, float]) -> list[ProductMaterial]:
        return [ProductMaterial(inventory_item_id=i, quantity=q) for i, q in pairs]

    return [
        Product(
            id="product-001",
            name="Chocolate Cake",
            sku="CK-001",
            description="Delicious chocolate cake",
            selling_price=25.99,
            production_cost=8.75,
            quantity=10,
            materials=bom(("inv-001", 0.5), ("inv-002", 0.3), ("inv-003", 0.2), ("inv-004", 4)),
            created_at="2023-04-16T09:30:00Z",
            updated_at="2023-04-16T09:30:00Z",
        ),
        Product(
            id="product-002",
            name="Vanilla Cupcake",
            sku="CP-001",
            description="Sweet vanilla cupcake with frosting",
            selling_price=3.99,
            production_cost=1.25,
            quantity=24,
            materials=bom(("inv-001", 0.1), ("inv-002", 0.08), ("inv-003", 0.05), ("inv-004", 1)),
            created_at="2023-04-16T09:45:00Z",
            updated_at="2023-04-16T09:45:00Z",
        ),
        Product(
            id="product-003",
            name="Bread Loaf",
            sku="BL-001",
            description="Freshly baked bread loaf",
            selling_price=4.50,
            production_cost=1.80,
            quantity=15,
            materials=bom(("inv-001", 0.5), ("inv-002", 0.05), ("inv-003", 0.1)),
            created_at="2023-04-16T10:00:00Z",
            updated_at="2023-04-16T10:00:00Z",
        ),
    ]


def _customers() -> list[Customer]:
    return [
        Customer(
            id=WALK_IN_CUSTOMER_ID,
            name="Walk-in Customer",
            customer_type=CustomerType.WALK_IN,
            created_at="2023-04-15T10:30:00Z",
            updated_at="2023-04-15T10:30:00Z",
        ),
        Customer(
            id="customer1",
            name="John Doe",
            email="john.doe@email.com",
            phone="(555) 123-4567",
            address="123 Main Street",
            city="Springfield",
            state="IL",
            zip_code="62701",
            total_purchases=5,
            total_spent=234.75,
            last_purchase_date="2023-04-20T14:30:00Z",
            notes="Preferred customer - likes discounts",
            created_at="2023-03-15T10:30:00Z",
            updated_at="2023-04-20T14:30:00Z",
        ),
        Customer(
            id="customer2",
            name="Jane Smith",
            email="jane.smith@email.com",
            phone="(555) 987-6543",
            address="456 Oak Avenue",
            city="Springfield",
            state="IL",
            zip_code="62702",
            customer_type=CustomerType.VIP,
            total_purchases=12,
            total_spent=1250.00,
            last_purchase_date="2023-04-18T16:45:00Z",
            notes="VIP customer - always pays on time",
            created_at="2023-02-10T09:15:00Z",
            updated_at="2023-04-18T16:45:00Z",
        ),
        Customer(
            id="customer3",
            name="Bob Johnson",
            email="bob.johnson@email.com",
            phone="(555) 456-7890",
            address="789 Pine Road",
            city="Springfield",
            state="IL",
            zip_code="62703",
            total_purchases=3,
            total_spent=89.50,
            last_purchase_date="2023-04-10T11:20:00Z",
            created_at="2023-04-01T14:22:00Z",
            updated_at="2023-04-10T11:20:00Z",
        ),
    ]


def _sales() -> list[Sale]:
    return [
        Sale(
            id="SALE-001",
            customer_id="customer1",
            customer_name="John Doe",
            items=[
                SaleItem(product_id="product-001", product_name="Chocolate Cake", quantity=1, unit_price=25.99),
                SaleItem(product_id="product-002", product_name="Vanilla Cupcake", quantity=2, unit_price=3.99),
            ],
            tax_rate=7,
            payment_method="Credit Card",
            status=SaleStatus.COMPLETED,
            created_at="2023-04-20T14:30:00Z",
            updated_at="2023-04-20T14:30:00Z",
        ),
        Sale(
            id="SALE-002",
            customer_id=WALK_IN_CUSTOMER_ID,
            customer_name="Walk-in Customer",
            items=[
                SaleItem(product_id="product-003", product_name="Bread Loaf", quantity=3, unit_price=4.5),
            ],
            tax_rate=7,
            payment_method="Cash",
            status=SaleStatus.COMPLETED,
            created_at="2023-04-20T16:45:00Z",
            updated_at="2023-04-20T16:45:00Z",
        ),
    ]


def seed_demo_data(store: LedgerStore) -> LedgerStore:
    """Replace the store contents with the demo bakery data set."""
    store.load(
        inventory=_inventory(),
        products=_products(),
        sales=_sales(),
        customers=_customers(),
    )
    return store

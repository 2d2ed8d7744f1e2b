"""
Field validation for entities entering the ledger.

Each validator returns a field -> message map (empty when valid) so a
caller can show every problem next to its input at once. Use
raise_for_errors() to turn a non-empty map into a ValidationError.
"""

import re

from backoffice.core.entities.customer import Customer, CustomerType
from backoffice.core.entities.inventory import InventoryItem
from backoffice.core.entities.product import Product
from backoffice.core.exceptions import ValidationError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^[\d\s\-()+]+$")
MIN_PHONE_DIGITS = 10


def raise_for_errors(errors: dict[str, str]) -> None:
    if errors:
        raise ValidationError(errors)


def validate_inventory_item(item: InventoryItem) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not item.name.strip():
        errors["name"] = "Name is required"
    if not item.sku.strip():
        errors["sku"] = "SKU is required"
    if not item.unit.strip():
        errors["unit"] = "Unit is required"
    if item.quantity < 0:
        errors["quantity"] = "Quantity cannot be negative"
    if item.cost_per_unit <= 0:
        errors["cost_per_unit"] = "Cost per unit must be greater than zero"
    if item.reorder_level < 0:
        errors["reorder_level"] = "Reorder level cannot be negative"
    return errors


def validate_product(product: Product) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not product.name.strip():
        errors["name"] = "Product name is required"
    if not product.sku.strip():
        errors["sku"] = "SKU is required"
    if product.selling_price <= 0:
        errors["selling_price"] = "Selling price must be greater than zero"
    if product.quantity < 0:
        errors["quantity"] = "Quantity cannot be negative"
    if not product.materials:
        errors["materials"] = "At least one material is required"

    for index, material in enumerate(product.materials):
        if not material.inventory_item_id:
            errors[f"materials.{index}.inventory_item_id"] = "Please select a material"
        if material.quantity <= 0:
            errors[f"materials.{index}.quantity"] = "Quantity must be greater than zero"
    return errors


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def is_valid_phone(phone: str) -> bool:
    digits = re.sub(r"\D", "", phone)
    return bool(PHONE_RE.match(phone)) and len(digits) >= MIN_PHONE_DIGITS


def validate_customer(customer: Customer) -> dict[str, str]:
    """Validate a customer being created or edited by a user.

    Only the system sentinel may carry the walk-in type.
    """
    errors: dict[str, str] = {}
    if not customer.name.strip():
        errors["name"] = "Customer name is required"
    if customer.email and not is_valid_email(customer.email):
        errors["email"] = "Please enter a valid email address"
    if customer.phone and not is_valid_phone(customer.phone):
        errors["phone"] = "Please enter a valid phone number"
    if customer.customer_type == CustomerType.WALK_IN:
        errors["customer_type"] = "Walk-in type is reserved for the walk-in customer"
    return errors


def validate_draft_line(product_id: str, quantity: float) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not product_id:
        errors["product_id"] = "Please select a product"
    if quantity <= 0:
        errors["quantity"] = "Quantity must be greater than zero"
    return errors


def validate_sale_submission(line_count: int, payment_method: str) -> dict[str, str]:
    errors: dict[str, str] = {}
    if line_count == 0:
        errors["items"] = "Add at least one item to the sale"
    if not payment_method.strip():
        errors["payment_method"] = "Select a payment method"
    return errors

"""Customer domain entities."""

from enum import Enum

from backoffice.core.entities.base import Entity

WALK_IN_CUSTOMER_ID = "walk-in"


class CustomerType(str, Enum):
    """Customer classification."""

    REGULAR = "regular"
    VIP = "vip"
    WHOLESALE = "wholesale"
    WALK_IN = "walk-in"


class Customer(Entity):
    """A purchasing customer with accrued purchase statistics."""

    name: str
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    customer_type: CustomerType = CustomerType.REGULAR
    total_purchases: int = 0
    total_spent: float = 0.0
    last_purchase_date: str | None = None
    notes: str = ""
    is_active: bool = True

"""Sale transaction entities."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from backoffice.core.entities.base import Entity


class SaleStatus(str, Enum):
    """Lifecycle states of a sale."""

    COMPLETED = "Completed"
    VOIDED = "Voided"
    PENDING = "Pending"


@dataclass(frozen=True)
class SaleTotals:
    """Derived money amounts of a sale."""

    subtotal: float
    tax_amount: float
    discount_amount: float
    total_amount: float


def compute_sale_totals(
    items: list["SaleItem"], tax_rate: float, discount_percent: float
) -> SaleTotals:
    """Subtotal from line totals; tax and discount are both taken on the subtotal."""
    subtotal = sum(item.total_price for item in items)
    tax_amount = subtotal * (tax_rate / 100)
    discount_amount = subtotal * (discount_percent / 100)
    return SaleTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        discount_amount=discount_amount,
        total_amount=subtotal + tax_amount - discount_amount,
    )


class SaleItem(BaseModel):
    """A single line on a sale, with price snapshots taken at sale time."""

    product_id: str  # weak reference to Product.id
    product_name: str
    quantity: float
    unit_price: float
    total_price: float = 0.0  # quantity * unit_price

    @model_validator(mode="after")
    def compute_line(self) -> "SaleItem":
        """Compute total_price from quantity and unit_price."""
        self.total_price = self.quantity * self.unit_price
        return self


class Sale(Entity):
    """A committed sale with computed totals."""

    customer_id: str  # weak reference, may be the walk-in sentinel
    customer_name: str
    items: list[SaleItem] = Field(default_factory=list)
    subtotal: float = 0.0
    tax_rate: float = 0.0
    tax_amount: float = 0.0
    discount_percent: float = 0.0
    discount_amount: float = 0.0
    total_amount: float = 0.0
    payment_method: str = ""
    status: SaleStatus = SaleStatus.COMPLETED

    @model_validator(mode="after")
    def compute_totals(self) -> "Sale":
        """Compute subtotal, tax, discount and total from items and rates."""
        totals = compute_sale_totals(self.items, self.tax_rate, self.discount_percent)
        self.subtotal = totals.subtotal
        self.tax_amount = totals.tax_amount
        self.discount_amount = totals.discount_amount
        self.total_amount = totals.total_amount
        return self

    @property
    def is_voided(self) -> bool:
        return self.status == SaleStatus.VOIDED


# Fields fixed once a sale is recorded
SALE_IMMUTABLE_FIELDS = frozenset(
    {
        "items",
        "subtotal",
        "tax_rate",
        "tax_amount",
        "discount_percent",
        "discount_amount",
        "total_amount",
    }
)

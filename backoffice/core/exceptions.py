"""
Domain exceptions for the back-office ledger.

Engine services raise these internally and convert them to
OperationResult values at their public boundary.
"""

from typing import Any


class BackOfficeError(Exception):
    """Base exception for all back-office errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for presentation layers."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation
class ValidationError(BackOfficeError):
    """One or more input fields failed validation.

    Carries every failing field at once so callers can render each
    message next to its input.
    """

    def __init__(self, errors: dict[str, str]):
        fields = ", ".join(sorted(errors))
        super().__init__(
            f"Validation failed for: {fields}",
            code="VALIDATION_ERROR",
            details={"errors": dict(errors)},
        )
        self.errors = dict(errors)


# Stock
class InsufficientStockError(BackOfficeError):
    """Requested quantity exceeds what is still available."""

    def __init__(self, product_id: str, requested: float, available: float):
        super().__init__(
            f"Only {available:g} units available for {product_id} "
            f"(requested {requested:g})",
            code="INSUFFICIENT_STOCK",
            details={
                "product_id": product_id,
                "requested": requested,
                "available": available,
            },
        )
        self.available = available


# Storage
class StorageError(BackOfficeError):
    """Base exception for entity store operations."""

    pass


class EntityNotFoundError(StorageError):
    """Entity id does not resolve in its store."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            f"{entity} not found: {entity_id}",
            code="NOT_FOUND",
            details={"entity": entity, "entity_id": entity_id},
        )


class DuplicateIdError(StorageError):
    """An entity with the same id already exists."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            f"{entity} already exists: {entity_id}",
            code="DUPLICATE_ID",
            details={"entity": entity, "entity_id": entity_id},
        )


# Customers
class SentinelProtectedError(BackOfficeError):
    """Attempt to modify the protected walk-in customer."""

    def __init__(self, customer_id: str, action: str):
        super().__init__(
            f"Cannot {action} the walk-in customer",
            code="SENTINEL_PROTECTED",
            details={"customer_id": customer_id, "action": action},
        )


# Sales
class InvalidTransitionError(BackOfficeError):
    """Sale status change not permitted from its current status."""

    def __init__(self, sale_id: str, from_status: str, to_status: str):
        super().__init__(
            f"Sale {sale_id} cannot move from {from_status} to {to_status}",
            code="INVALID_TRANSITION",
            details={
                "sale_id": sale_id,
                "from_status": from_status,
                "to_status": to_status,
            },
        )


class ConfigurationError(BackOfficeError):
    """Configuration error."""

    pass

"""Unit tests for domain exceptions."""

import pytest

from backoffice.core.exceptions import (
    BackOfficeError,
    ConfigurationError,
    DuplicateIdError,
    EntityNotFoundError,
    InsufficientStockError,
    InvalidTransitionError,
    SentinelProtectedError,
    StorageError,
    ValidationError,
)


class TestBackOfficeError:
    """Tests for base BackOfficeError exception."""

    def test_basic_initialization(self):
        error = BackOfficeError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "BackOfficeError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = BackOfficeError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = BackOfficeError("Test", code="TEST", details={"a": 1})
        assert error.to_dict() == {"error": "TEST", "message": "Test", "details": {"a": 1}}

    def test_can_be_raised_and_caught(self):
        with pytest.raises(BackOfficeError):
            raise BackOfficeError("boom")


class TestValidationError:
    def test_carries_all_fields(self):
        error = ValidationError({"sku": "SKU is required", "name": "Name is required"})
        assert error.code == "VALIDATION_ERROR"
        assert error.errors == {"sku": "SKU is required", "name": "Name is required"}
        assert error.message == "Validation failed for: name, sku"
        assert error.details["errors"]["sku"] == "SKU is required"


class TestInsufficientStockError:
    def test_reports_available(self):
        error = InsufficientStockError("p1", requested=3, available=2)
        assert error.code == "INSUFFICIENT_STOCK"
        assert error.available == 2
        assert "Only 2 units available" in error.message


class TestStorageErrors:
    def test_not_found(self):
        error = EntityNotFoundError("product", "p1")
        assert isinstance(error, StorageError)
        assert error.code == "NOT_FOUND"
        assert error.details == {"entity": "product", "entity_id": "p1"}

    def test_duplicate(self):
        error = DuplicateIdError("sale", "SALE-1")
        assert isinstance(error, StorageError)
        assert error.code == "DUPLICATE_ID"


class TestDomainErrors:
    def test_sentinel_protected(self):
        error = SentinelProtectedError("walk-in", "deactivate")
        assert error.code == "SENTINEL_PROTECTED"
        assert error.message == "Cannot deactivate the walk-in customer"

    def test_invalid_transition(self):
        error = InvalidTransitionError("SALE-1", "Voided", "Voided")
        assert error.code == "INVALID_TRANSITION"
        assert error.details["from_status"] == "Voided"

    def test_configuration_error_default_code(self):
        assert ConfigurationError("bad").code == "ConfigurationError"

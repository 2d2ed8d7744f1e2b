"""Operation outcome returned by every engine mutation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from backoffice.core.exceptions import BackOfficeError, EntityNotFoundError, ValidationError

T = TypeVar("T")


class Outcome(str, Enum):
    """What an engine operation did."""

    APPLIED = "applied"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"


@dataclass
class OperationResult(Generic[T]):
    """Success/failure of an engine operation.

    NOT_FOUND means nothing happened because the target id did not
    resolve. REJECTED carries either field errors or a single message.
    """

    outcome: Outcome
    value: T | None = None
    errors: dict[str, str] = field(default_factory=dict)
    message: str | None = None
    code: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.APPLIED

    @classmethod
    def applied(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(outcome=Outcome.APPLIED, value=value)

    @classmethod
    def rejected(cls, errors: dict[str, str]) -> "OperationResult[T]":
        """Failed result for field validation errors."""
        return cls.from_error(ValidationError(errors))

    @classmethod
    def from_error(cls, error: BackOfficeError) -> "OperationResult[T]":
        """Build a failed result from a domain exception."""
        if isinstance(error, EntityNotFoundError):
            outcome = Outcome.NOT_FOUND
        else:
            outcome = Outcome.REJECTED
        errors = error.errors if isinstance(error, ValidationError) else {}
        return cls(
            outcome=outcome,
            errors=dict(errors),
            message=error.message,
            code=error.code,
        )

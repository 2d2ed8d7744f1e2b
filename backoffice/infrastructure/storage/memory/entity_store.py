"""In-memory implementation of keyed entity storage."""

from collections.abc import Callable
from typing import Any, TypeVar

import pydantic

from backoffice.config import get_logger
from backoffice.core.entities.base import Entity
from backoffice.core.entities.result import OperationResult
from backoffice.core.exceptions import (
    BackOfficeError,
    DuplicateIdError,
    EntityNotFoundError,
    ValidationError,
)
from backoffice.core.interfaces.collaborators import IClock
from backoffice.core.interfaces.entity_store import IEntityStore

logger = get_logger(__name__)

T = TypeVar("T", bound=Entity)

# Returns a field -> message map, empty when the record is valid
RecordValidator = Callable[[Any], dict[str, str]]


class InMemoryEntityStore(IEntityStore[T]):
    """Dict-backed store for one entity type.

    Entities are copied on the way in and out, so callers never hold a
    reference into the store and all changes go through update(). When a
    validator is given, every edited record must pass it.
    """

    def __init__(
        self,
        entity_name: str,
        clock: IClock,
        immutable_fields: frozenset[str] = frozenset(),
        validator: RecordValidator | None = None,
    ):
        self._entity_name = entity_name
        self._clock = clock
        self._immutable_fields = immutable_fields
        self._validator = validator
        self._records: dict[str, T] = {}

    @property
    def entity_name(self) -> str:
        return self._entity_name

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._records

    def list_all(self) -> list[T]:
        """List all entities in insertion order."""
        return [record.model_copy(deep=True) for record in self._records.values()]

    def get(self, entity_id: str) -> T | None:
        """Resolve an entity by id."""
        record = self._records.get(entity_id)
        if record is None:
            return None
        return record.model_copy(deep=True)

    def add(self, entity: T) -> OperationResult[T]:
        """Add a new entity, stamping created_at/updated_at when unset."""
        if entity.id in self._records:
            logger.warning(
                "entity_add_rejected",
                entity=self._entity_name,
                entity_id=entity.id,
            )
            return OperationResult.from_error(DuplicateIdError(self._entity_name, entity.id))

        stored = entity.model_copy(deep=True)
        if not stored.created_at:
            stored.created_at = self._clock.now()
        if not stored.updated_at:
            stored.updated_at = stored.created_at
        self._records[stored.id] = stored

        logger.info("entity_added", entity=self._entity_name, entity_id=stored.id)
        return OperationResult.applied(stored.model_copy(deep=True))

    def update(self, entity_id: str, **fields: Any) -> OperationResult[T]:
        """Merge fields into an entity and refresh updated_at.

        The merged record is parsed and checked before it replaces the
        stored one. Guards see the parsed record, so coerced inputs such
        as is_active="false" are judged by their final value.
        """
        current = self._records.get(entity_id)
        if current is None:
            logger.info("entity_update_skipped", entity=self._entity_name, entity_id=entity_id)
            return OperationResult.from_error(EntityNotFoundError(self._entity_name, entity_id))

        try:
            self._check_fields(current, fields)
            merged = {**current.model_dump(), **fields, "updated_at": self._clock.now()}
            try:
                updated = type(current).model_validate(merged)
            except pydantic.ValidationError as e:
                raise ValidationError(
                    {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
                ) from e
            self._guard_update(current, updated)
            if self._validator is not None:
                errors = self._validator(updated)
                if errors:
                    raise ValidationError(errors)
        except BackOfficeError as e:
            logger.warning(
                "entity_update_rejected",
                entity=self._entity_name,
                entity_id=entity_id,
                code=e.code,
            )
            return OperationResult.from_error(e)

        self._records[entity_id] = updated
        logger.info(
            "entity_updated",
            entity=self._entity_name,
            entity_id=entity_id,
            fields=sorted(fields),
        )
        return OperationResult.applied(updated.model_copy(deep=True))

    def remove(self, entity_id: str) -> OperationResult[T]:
        """Remove an entity without touching anything that references it."""
        current = self._records.get(entity_id)
        if current is None:
            return OperationResult.from_error(EntityNotFoundError(self._entity_name, entity_id))

        try:
            self._guard_remove(current)
        except BackOfficeError as e:
            logger.warning(
                "entity_remove_rejected",
                entity=self._entity_name,
                entity_id=entity_id,
                code=e.code,
            )
            return OperationResult.from_error(e)

        del self._records[entity_id]
        logger.info("entity_removed", entity=self._entity_name, entity_id=entity_id)
        return OperationResult.applied(current)

    def reset(self, entities: list[T]) -> None:
        """Replace the whole collection (bulk load)."""
        self._records = {e.id: e.model_copy(deep=True) for e in entities}
        logger.info("entity_store_reset", entity=self._entity_name, count=len(entities))

    def _check_fields(self, current: T, fields: dict[str, Any]) -> None:
        errors: dict[str, str] = {}
        for name in fields:
            if name in ("id", "created_at", "updated_at"):
                errors[name] = "Field is managed by the store"
            elif name not in type(current).model_fields:
                errors[name] = "Unknown field"
            elif name in self._immutable_fields:
                errors[name] = "Field cannot be changed once recorded"
        if errors:
            raise ValidationError(errors)

    def _guard_update(self, current: T, updated: T) -> None:
        """Hook for subclasses protecting specific records."""

    def _guard_remove(self, current: T) -> None:
        """Hook for subclasses protecting specific records."""

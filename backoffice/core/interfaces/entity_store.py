"""Abstract interface for keyed entity storage."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from backoffice.core.entities.base import Entity
from backoffice.core.entities.result import OperationResult

T = TypeVar("T", bound=Entity)


class IEntityStore(ABC, Generic[T]):
    """Interface for create/read/update/delete/list over one entity type."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """List all entities in insertion order."""
        pass

    @abstractmethod
    def get(self, entity_id: str) -> T | None:
        """Resolve an entity by id, None if absent."""
        pass

    @abstractmethod
    def add(self, entity: T) -> OperationResult[T]:
        """Add a new entity; rejected if the id is already present."""
        pass

    @abstractmethod
    def update(self, entity_id: str, **fields: Any) -> OperationResult[T]:
        """Merge fields into an entity and refresh updated_at."""
        pass

    @abstractmethod
    def remove(self, entity_id: str) -> OperationResult[T]:
        """Remove an entity. Never cascades to referencing entities."""
        pass

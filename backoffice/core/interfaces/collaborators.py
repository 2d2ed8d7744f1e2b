"""Abstract interfaces for the clock and identifier generator."""

from abc import ABC, abstractmethod


class IClock(ABC):
    """Source of ISO-8601 UTC timestamps."""

    @abstractmethod
    def now(self) -> str:
        """Current time as an ISO-8601 UTC string."""
        pass


class IIdGenerator(ABC):
    """Source of collision-resistant entity ids."""

    @abstractmethod
    def new_id(self, prefix: str | None = None) -> str:
        """Generate a new unique id, optionally prefixed."""
        pass

"""Identifier generators."""

import itertools
import uuid

from backoffice.core.interfaces.collaborators import IIdGenerator


class UuidIdGenerator(IIdGenerator):
    """Random UUID4 ids, optionally prefixed ("SALE-3f2a...")."""

    def new_id(self, prefix: str | None = None) -> str:
        value = uuid.uuid4().hex
        return f"{prefix}-{value}" if prefix else value


class SequentialIdGenerator(IIdGenerator):
    """Monotonic counter ids, unique within one process."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def new_id(self, prefix: str | None = None) -> str:
        value = f"{next(self._counter):06d}"
        return f"{prefix}-{value}" if prefix else value

"""Shared base for stored entities."""

from datetime import datetime

from pydantic import BaseModel


class Entity(BaseModel):
    """Keyed, timestamped record owned by an entity store.

    Timestamps are ISO-8601 UTC strings supplied by the clock.
    """

    id: str
    created_at: str = ""
    updated_at: str = ""


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z'."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)

"""Clock implementations."""

from datetime import datetime, timedelta, timezone

from backoffice.core.interfaces.collaborators import IClock


def _format(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


class SystemClock(IClock):
    """Wall-clock time in UTC."""

    def now(self) -> str:
        return _format(datetime.now(timezone.utc))


class FixedClock(IClock):
    """Deterministic clock for tests and replays.

    Returns the same instant until advanced.
    """

    def __init__(self, start: datetime | None = None):
        self._current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def now(self) -> str:
        return _format(self._current)

    def advance(self, **delta: float) -> str:
        """Move the clock forward by a timedelta spec (e.g. minutes=5)."""
        self._current = self._current + timedelta(**delta)
        return self.now()

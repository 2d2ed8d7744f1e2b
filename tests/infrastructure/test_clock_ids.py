"""Tests for clock and id generator implementations."""

from datetime import datetime, timezone

from backoffice.core.entities.base import parse_timestamp
from backoffice.infrastructure.clock import FixedClock, SystemClock
from backoffice.infrastructure.ids import SequentialIdGenerator, UuidIdGenerator


class TestClocks:
    def test_fixed_clock(self):
        clock = FixedClock(datetime(2023, 4, 20, 14, 30, tzinfo=timezone.utc))
        assert clock.now() == "2023-04-20T14:30:00.000Z"
        assert clock.now() == clock.now()

    def test_advance(self):
        clock = FixedClock()
        assert clock.advance(minutes=90) == "2024-01-01T01:30:00.000Z"

    def test_system_clock_is_utc(self):
        value = SystemClock().now()
        assert value.endswith("Z")
        assert parse_timestamp(value).tzinfo is not None


class TestIdGenerators:
    def test_sequential(self):
        ids = SequentialIdGenerator()
        assert ids.new_id() == "000001"
        assert ids.new_id("SALE") == "SALE-000002"

    def test_uuid_unique_and_prefixed(self):
        ids = UuidIdGenerator()
        first, second = ids.new_id("SALE"), ids.new_id("SALE")
        assert first != second
        assert first.startswith("SALE-")
        assert len(ids.new_id()) == 32

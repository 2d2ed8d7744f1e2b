"""Tests for money rounding."""

from backoffice.core.services.money import format_money, round_money


class TestRoundMoney:
    def test_half_up(self):
        assert round_money(2.345) == 2.35
        assert round_money(36.3479) == 36.35

    def test_custom_decimals(self):
        assert round_money(1.23456, 3) == 1.235

    def test_format(self):
        assert format_money(36.3479) == "36.35"
        assert format_money(5) == "5.00"

    def test_decimals_from_settings(self, monkeypatch):
        from backoffice.config import reset_settings

        monkeypatch.setenv("LEDGER_MONEY_DECIMALS", "1")
        reset_settings()
        assert format_money(2.25) == "2.3"

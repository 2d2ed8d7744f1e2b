"""Presentation-time money rounding."""

from decimal import ROUND_HALF_UP, Decimal

from backoffice.config import get_settings


def round_money(value: float, decimals: int | None = None) -> float:
    """Round half-up for display. Stored values are never rounded."""
    if decimals is None:
        decimals = get_settings().ledger.money_decimals
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_money(value: float, decimals: int | None = None) -> str:
    """Render a value with a fixed number of decimals, e.g. '36.35'."""
    if decimals is None:
        decimals = get_settings().ledger.money_decimals
    return f"{round_money(value, decimals):.{decimals}f}"

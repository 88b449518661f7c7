# app/utils/money.py
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def quantize_money(amount: Decimal) -> Decimal:
    """Round to 2 decimal places (half-up, as shown on receipts)."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def to_minor_units(amount: Decimal) -> int:
    """
    Convert a currency amount to the gateway's minor units (cents).

    Example: Decimal("41.97") -> 4197
    """
    return int((quantize_money(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))

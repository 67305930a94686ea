"""Money rounding shared by every engine output.

Amounts are always rounded up to the next cent, never down.
"""

from decimal import Decimal, ROUND_CEILING

TWO_PLACES = Decimal("0.01")

# Largest exponent a value can have and still be quantized to cents in the
# default 28-digit context.
MAX_ADJUSTED_EXPONENT = 25


def round_up(amount: Decimal) -> Decimal:
    """Ceiling to 2 decimal places. 83.334 -> 83.34, 83.30 -> 83.30."""
    if amount == 0:
        return Decimal("0")
    return amount.quantize(TWO_PLACES, ROUND_CEILING)

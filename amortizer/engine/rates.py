"""Nominal annual rate to effective rate per payment period."""

from decimal import Decimal

from amortizer.errors import InvalidFrequency


def period_rate(
    annual_rate_pct: Decimal,
    compounding_periods_per_year: int,
    payment_frequency: int,
) -> Decimal:
    """Effective interest rate charged once per payment period.

    The nominal rate compounds ``compounding_periods_per_year`` times a year;
    the result is the equivalent rate for one of ``payment_frequency`` periods.

        j = (1 + i / (c * 100)) ^ (c / f) - 1

    Returned as a decimal fraction (0.0081 for 0.81%), unrounded.
    """
    if compounding_periods_per_year <= 0:
        raise InvalidFrequency("compounding_periods_per_year", compounding_periods_per_year)
    if payment_frequency <= 0:
        raise InvalidFrequency("payment_frequency", payment_frequency)

    if annual_rate_pct == 0:
        return Decimal("0")

    c = Decimal(compounding_periods_per_year)
    rate_per_compounding = annual_rate_pct / (c * 100)
    return (1 + rate_per_compounding) ** (c / Decimal(payment_frequency)) - 1

"""Periodic payment formulas.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from amortizer.config import settings
from amortizer.engine.rates import period_rate
from amortizer.engine.rounding import round_up


def interest_only_periodic_payment(
    loan_amount: Decimal,
    annual_rate_pct: Decimal,
    payment_frequency: int,
) -> Decimal:
    """Interest charged per period on an interest-only loan.

    Simple interest: the nominal rate is split evenly across the payments,
    compounding frequency plays no part.
    """
    annual_rate = annual_rate_pct / 100
    return round_up(loan_amount * annual_rate / payment_frequency)


def amortized_periodic_payment(
    loan_amount: Decimal,
    annual_rate_pct: Decimal,
    compounding_periods_per_year: int,
    payment_frequency: int,
    amortization_period_months: int,
    term_in_months: int,
) -> Decimal:
    """Fixed payment that retires the loan over the amortization period.

    Not rounded when there is nothing to amortize: a period under one month
    is a single bullet payment of the whole amount, and a zero rate is a
    straight-line split of the amount over the term (the term, not the
    amortization period).
    """
    if amortization_period_months < 1:
        return loan_amount
    if annual_rate_pct <= 0:
        return loan_amount / term_in_months

    j = period_rate(annual_rate_pct, compounding_periods_per_year, payment_frequency)
    n = Decimal(payment_frequency * amortization_period_months) / 12
    # PMT = P * [j(1+j)^n] / [(1+j)^n - 1]
    factor = (1 + j) ** n
    if factor == 1:
        # Rate too small to register at working precision
        return loan_amount / term_in_months
    payment = loan_amount * j * factor / (factor - 1)
    return round_up(payment)


def per_diem(loan_amount: Decimal, annual_rate_pct: Decimal) -> Decimal:
    """One day's interest, on a fixed-length year regardless of leap years."""
    return interest_only_periodic_payment(
        loan_amount, annual_rate_pct, settings.per_diem_days_in_year
    )

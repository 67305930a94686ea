"""Supported payment frequencies."""

from amortizer.errors import InvalidFrequency
from amortizer.models.loan import PaymentFrequency

PAYMENT_FREQUENCIES: tuple[PaymentFrequency, ...] = (
    PaymentFrequency(52, "weekly", False),
    PaymentFrequency(26, "bi-weekly", False),
    PaymentFrequency(24, "semi-monthly", False),
    PaymentFrequency(12, "monthly", True),
    PaymentFrequency(6, "bi-monthly", False),
    PaymentFrequency(4, "quarterly", False),
    PaymentFrequency(2, "semi-annually", True),
    PaymentFrequency(1, "annually", True),
)

_BY_PERIODS = {f.periods_per_year: f for f in PAYMENT_FREQUENCIES}

MIN_COMPOUNDING_PERIODS = 1
MAX_COMPOUNDING_PERIODS = 52


def payment_frequency(periods_per_year: int) -> PaymentFrequency:
    """Look up a frequency descriptor, raising InvalidFrequency if unsupported."""
    if isinstance(periods_per_year, bool) or not isinstance(periods_per_year, int):
        raise InvalidFrequency("payment_frequency", periods_per_year)
    try:
        return _BY_PERIODS[periods_per_year]
    except KeyError:
        raise InvalidFrequency("payment_frequency", periods_per_year) from None


def check_compounding_periods(periods_per_year) -> int:
    if (
        isinstance(periods_per_year, bool)
        or not isinstance(periods_per_year, int)
        or not MIN_COMPOUNDING_PERIODS <= periods_per_year <= MAX_COMPOUNDING_PERIODS
    ):
        raise InvalidFrequency("compounding_periods_per_year", periods_per_year)
    return periods_per_year

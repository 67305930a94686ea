"""Public entry points of the amortization engine.

Each operation validates its input once, works on a private copy of the loan
attributes, and raises an ``amortizer.errors`` exception before doing any
computation if the input is unusable. Inputs that pass validation but still
overflow the decimal context are reported the same way.
"""

import functools
import logging
from decimal import Decimal, DecimalException

from amortizer.engine import validation
from amortizer.engine.frequencies import PAYMENT_FREQUENCIES
from amortizer.engine.payments import (
    amortized_periodic_payment,
    interest_only_periodic_payment,
    per_diem,
)
from amortizer.engine.rounding import round_up
from amortizer.engine.schedule import build_schedule
from amortizer.engine.summary import summarize_schedule
from amortizer.errors import InvalidAttributes
from amortizer.models.loan import LoanAttributes, PaymentFrequency
from amortizer.models.schedule import Payment, ScheduleSummary

logger = logging.getLogger(__name__)


def _computable(func):
    @functools.wraps(func)
    def wrapper(attrs: LoanAttributes):
        try:
            return func(attrs)
        except DecimalException as e:
            logger.warning("%s failed on out-of-range input: %r", func.__name__, e)
            raise InvalidAttributes(
                "loan_amount and interest_rate are outside the computable range"
            ) from e
    return wrapper


def _periodic_payment(loan: LoanAttributes) -> Decimal:
    if loan.interest_only:
        payment = interest_only_periodic_payment(
            loan.loan_amount, loan.interest_rate, loan.payment_frequency
        )
    else:
        payment = amortized_periodic_payment(
            loan.loan_amount,
            loan.interest_rate,
            loan.compounding_periods_per_year,
            loan.payment_frequency,
            loan.amortization_period_months,
            loan.term_in_months,
        )
    return round_up(payment)


@_computable
def get_periodic_payment(attrs: LoanAttributes) -> Decimal:
    """Required payment per period, rounded up to the cent."""
    return _periodic_payment(validation.for_periodic_payment(attrs))


@_computable
def get_payments(attrs: LoanAttributes) -> list[Payment]:
    """Full schedule: the adjustment payment followed by the regular payments.

    A preferred payment above the required payment goes to extra principal;
    one below it is ignored.
    """
    return build_schedule(validation.for_schedule(attrs))


@_computable
def get_per_diem(attrs: LoanAttributes) -> Decimal:
    """Daily interest on the full loan amount."""
    loan = validation.for_per_diem(attrs)
    return per_diem(loan.loan_amount, loan.interest_rate)


@_computable
def get_schedule_summary(attrs: LoanAttributes) -> ScheduleSummary:
    loan = validation.for_schedule(attrs)
    return summarize_schedule(build_schedule(loan), _periodic_payment(loan))


def list_supported_payment_frequencies() -> list[PaymentFrequency]:
    """Weekly through annually, most frequent first."""
    return list(PAYMENT_FREQUENCIES)
